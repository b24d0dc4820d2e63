from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Tuple

from .errors import EngineInputError


class Trait(str, Enum):
    GRATITUDE = "Gratitude"
    RESILIENCE = "Resilience"
    EMPATHY = "Empathy"
    SOCIABILITY = "Sociability"
    SOCIAL_COGNITION = "Social Cognition"
    COURAGE = "Courage"

    @property
    def column_name(self) -> str:
        return self.value.lower().replace(" ", "_") + "_score"


@dataclass(frozen=True)
class Option:
    score: int
    text_en: str
    text_hi: str

    def text(self, language: str) -> str:
        return self.text_hi if language == "hi" else self.text_en


@dataclass(frozen=True)
class Question:
    id: int
    trait: Trait
    prompt_en: str
    prompt_hi: str
    options: Tuple[Option, ...]

    @property
    def scores(self) -> Tuple[int, ...]:
        return tuple(option.score for option in self.options)

    def prompt(self, language: str) -> str:
        return self.prompt_hi if language == "hi" else self.prompt_en


LANGUAGES: Dict[str, Dict[str, str]] = {
    "en": {"label": "English", "proceed": "Proceed in English"},
    "hi": {"label": "हिन्दी", "proceed": "हिन्दी में आगे बढ़ें"},
}
DEFAULT_LANGUAGE = "en"
# Stored records always carry English text, whatever the display language was.
PERSISTED_LANGUAGE = "en"

SCORE_VALUES: Tuple[int, ...] = (1, 2, 3)
MIN_OPTION_SCORE = min(SCORE_VALUES)
MAX_OPTION_SCORE = max(SCORE_VALUES)

TRAIT_LABELS: Dict[str, Dict[Trait, str]] = {
    "en": {
        Trait.GRATITUDE: "Gratitude",
        Trait.RESILIENCE: "Resilience",
        Trait.EMPATHY: "Empathy",
        Trait.SOCIABILITY: "Sociability",
        Trait.SOCIAL_COGNITION: "Social Cognition",
        Trait.COURAGE: "Courage",
    },
    "hi": {
        Trait.GRATITUDE: "कृतज्ञता",
        Trait.RESILIENCE: "लचीलापन",
        Trait.EMPATHY: "सहानुभूति",
        Trait.SOCIABILITY: "मिलनसारिता",
        Trait.SOCIAL_COGNITION: "सामाजिक समझ",
        Trait.COURAGE: "साहस",
    },
}

QUESTIONS: List[Question] = [
    Question(
        id=1,
        trait=Trait.GRATITUDE,
        prompt_en="A neighbour notices you struggling with heavy bags and helps you carry them home. What do you do?",
        prompt_hi="एक पड़ोसी देखता है कि आप भारी थैले उठाने में परेशान हैं और उन्हें घर तक पहुँचाने में आपकी मदद करता है। आप क्या करते हैं?",
        options=(
            Option(2, "Thank them briefly and go inside.", "उन्हें संक्षेप में धन्यवाद देकर अंदर चले जाते हैं।"),
            Option(
                3,
                "Thank them warmly and look for a chance to help them in return.",
                "उन्हें दिल से धन्यवाद देते हैं और बदले में उनकी मदद करने का मौका ढूँढते हैं।",
            ),
            Option(
                1,
                "Think nothing of it; they were going that way anyway.",
                "इसे कोई खास बात नहीं मानते; वे उसी रास्ते जा ही रहे थे।",
            ),
        ),
    ),
    Question(
        id=2,
        trait=Trait.RESILIENCE,
        prompt_en="You did not clear an important exam that you had prepared hard for. How do you respond?",
        prompt_hi="आपने जिस महत्वपूर्ण परीक्षा के लिए कड़ी तैयारी की थी, उसमें आप सफल नहीं हुए। आप कैसे प्रतिक्रिया देते हैं?",
        options=(
            Option(
                1,
                "Decide that trying again is pointless and give up.",
                "तय कर लेते हैं कि दोबारा कोशिश करना बेकार है और हार मान लेते हैं।",
            ),
            Option(
                3,
                "Review what went wrong and make a new plan to try again.",
                "देखते हैं कि क्या गलत हुआ और दोबारा प्रयास करने के लिए नई योजना बनाते हैं।",
            ),
            Option(
                2,
                "Stay upset for a long time before slowly trying again.",
                "काफ़ी समय तक दुखी रहते हैं, फिर धीरे-धीरे दोबारा कोशिश करते हैं।",
            ),
        ),
    ),
    Question(
        id=3,
        trait=Trait.EMPATHY,
        prompt_en="A friend who is usually cheerful has been quiet and withdrawn all week. What do you do?",
        prompt_hi="आपका एक मित्र जो आमतौर पर खुशमिज़ाज रहता है, पूरे सप्ताह से चुप और अलग-थलग है। आप क्या करते हैं?",
        options=(
            Option(
                3,
                "Gently ask how they are feeling and listen without judging.",
                "प्यार से पूछते हैं कि वे कैसा महसूस कर रहे हैं और बिना आलोचना किए सुनते हैं।",
            ),
            Option(
                1,
                "Leave it alone; everyone has their own problems.",
                "कुछ नहीं करते; सबकी अपनी-अपनी परेशानियाँ होती हैं।",
            ),
            Option(
                2,
                "Ask someone else to find out what is wrong.",
                "किसी और से कहते हैं कि वह पता करे कि क्या बात है।",
            ),
        ),
    ),
    Question(
        id=4,
        trait=Trait.SOCIABILITY,
        prompt_en="You are invited to a community gathering where you know only a few people. What do you do?",
        prompt_hi="आपको एक सामुदायिक कार्यक्रम में बुलाया गया है जहाँ आप केवल कुछ ही लोगों को जानते हैं। आप क्या करते हैं?",
        options=(
            Option(
                2,
                "Go, but stay with the people you already know.",
                "जाते हैं, लेकिन केवल उन्हीं लोगों के साथ रहते हैं जिन्हें पहले से जानते हैं।",
            ),
            Option(
                3,
                "Go and introduce yourself to new people.",
                "जाते हैं और नए लोगों से अपना परिचय करवाते हैं।",
            ),
            Option(
                1,
                "Make an excuse and stay at home.",
                "कोई बहाना बनाकर घर पर ही रहते हैं।",
            ),
        ),
    ),
    Question(
        id=5,
        trait=Trait.SOCIAL_COGNITION,
        prompt_en="During a group discussion, one member keeps getting interrupted whenever they speak. What do you do?",
        prompt_hi="एक समूह चर्चा के दौरान, एक सदस्य जब भी बोलता है, उसे बार-बार टोका जाता है। आप क्या करते हैं?",
        options=(
            Option(
                3,
                "Notice it and invite them to finish their point.",
                "इस पर ध्यान देते हैं और उन्हें अपनी बात पूरी करने के लिए आमंत्रित करते हैं।",
            ),
            Option(
                2,
                "Notice it but say nothing.",
                "ध्यान तो देते हैं, पर कुछ नहीं कहते।",
            ),
            Option(
                1,
                "Do not notice anything unusual.",
                "कुछ भी असामान्य नहीं दिखता।",
            ),
        ),
    ),
    Question(
        id=6,
        trait=Trait.COURAGE,
        prompt_en="You see someone being treated unfairly in a public place. What do you do?",
        prompt_hi="आप किसी सार्वजनिक स्थान पर किसी के साथ अन्याय होते देखते हैं। आप क्या करते हैं?",
        options=(
            Option(
                1,
                "Walk away; it is not your business.",
                "वहाँ से चले जाते हैं; यह आपका मामला नहीं है।",
            ),
            Option(
                3,
                "Calmly step in or call for help to stop it.",
                "शांति से हस्तक्षेप करते हैं या इसे रोकने के लिए मदद बुलाते हैं।",
            ),
            Option(
                2,
                "Feel bad but wait to see if someone else acts.",
                "बुरा लगता है, पर इंतज़ार करते हैं कि कोई और कुछ करे।",
            ),
        ),
    ),
]

# (trait, score) -> locale -> equivalent phrasings. The first phrasing is the default.
FEEDBACK: Dict[Trait, Dict[int, Dict[str, Tuple[str, ...]]]] = {
    Trait.GRATITUDE: {
        1: {
            "en": (
                "You may sometimes overlook the kindness of others. Pausing to notice small acts of help can brighten your days.",
            ),
            "hi": (
                "आप कभी-कभी दूसरों की दयालुता को नज़रअंदाज़ कर देते हैं। मदद के छोटे-छोटे कामों पर ध्यान देना आपके दिन को खुशनुमा बना सकता है।",
            ),
        },
        2: {
            "en": (
                "You acknowledge the help you receive. Expressing your thanks a little more openly can deepen your relationships.",
            ),
            "hi": (
                "आप मिली हुई मदद को स्वीकार करते हैं। अपना आभार थोड़ा और खुलकर व्यक्त करना आपके रिश्तों को और गहरा कर सकता है।",
            ),
        },
        3: {
            "en": (
                "You value the kindness of others and return it generously. Your gratitude strengthens the people around you.",
                "You notice and honour the help you receive. This warmth makes others feel appreciated.",
            ),
            "hi": (
                "आप दूसरों की दयालुता को महत्व देते हैं और उदारता से लौटाते हैं। आपकी कृतज्ञता आपके आसपास के लोगों को मज़बूत बनाती है।",
                "आप मिली हुई मदद पर ध्यान देते हैं और उसका सम्मान करते हैं। आपकी यह गर्मजोशी दूसरों को सराहा हुआ महसूस कराती है।",
            ),
        },
    },
    Trait.RESILIENCE: {
        1: {
            "en": (
                "Setbacks can feel discouraging to you. Remember that every failure is a chance to learn, and small steps forward count.",
            ),
            "hi": (
                "असफलताएँ आपको निराश कर सकती हैं। याद रखें कि हर असफलता सीखने का मौका है, और आगे बढ़ाया गया हर छोटा कदम मायने रखता है।",
            ),
        },
        2: {
            "en": (
                "You recover from setbacks, though it may take time. Being kind to yourself can help you bounce back sooner.",
            ),
            "hi": (
                "आप असफलताओं से उबर जाते हैं, भले ही इसमें समय लगे। खुद के प्रति दयालु रहना आपको जल्दी संभलने में मदद कर सकता है।",
            ),
        },
        3: {
            "en": (
                "You treat setbacks as lessons and move forward with a plan. This resilience will carry you through challenges.",
            ),
            "hi": (
                "आप असफलताओं को सबक मानते हैं और योजना के साथ आगे बढ़ते हैं। यह लचीलापन आपको हर चुनौती से पार ले जाएगा।",
            ),
        },
    },
    Trait.EMPATHY: {
        1: {
            "en": (
                "You tend to keep your distance from others' troubles. Reaching out, even briefly, can mean a lot to someone who is struggling.",
            ),
            "hi": (
                "आप दूसरों की परेशानियों से दूरी बनाए रखते हैं। किसी परेशान व्यक्ति से थोड़ी देर के लिए भी बात करना उसके लिए बहुत मायने रख सकता है।",
            ),
        },
        2: {
            "en": (
                "You care about others and want them to be well. Offering your own time and attention can make your care felt directly.",
            ),
            "hi": (
                "आप दूसरों की परवाह करते हैं और उनका भला चाहते हैं। अपना समय और ध्यान देकर आप अपनी परवाह को सीधे महसूस करा सकते हैं।",
            ),
        },
        3: {
            "en": (
                "You sense how others feel and respond with care. People trust you because you listen.",
            ),
            "hi": (
                "आप दूसरों की भावनाओं को समझते हैं और परवाह के साथ प्रतिक्रिया देते हैं। लोग आप पर भरोसा करते हैं क्योंकि आप उनकी बात सुनते हैं।",
            ),
        },
    },
    Trait.SOCIABILITY: {
        1: {
            "en": (
                "You prefer familiar settings and your own company. Trying one small new social step at a time can open new friendships.",
            ),
            "hi": (
                "आप जानी-पहचानी जगहें और अपनी संगति पसंद करते हैं। एक-एक करके छोटे सामाजिक कदम उठाने से नई दोस्तियाँ बन सकती हैं।",
            ),
        },
        2: {
            "en": (
                "You enjoy company you are comfortable with. Stepping a little beyond your circle can bring fresh ideas and connections.",
            ),
            "hi": (
                "आप उन लोगों की संगति का आनंद लेते हैं जिनके साथ आप सहज हैं। अपने दायरे से थोड़ा बाहर निकलना नए विचार और संबंध ला सकता है।",
            ),
        },
        3: {
            "en": (
                "You connect easily with new people and bring them together. Your openness makes every gathering warmer.",
            ),
            "hi": (
                "आप नए लोगों से आसानी से जुड़ जाते हैं और उन्हें साथ लाते हैं। आपका खुलापन हर मिलन को और आत्मीय बना देता है।",
            ),
        },
    },
    Trait.SOCIAL_COGNITION: {
        1: {
            "en": (
                "Group dynamics may sometimes pass you by. Watching how others react in a conversation can help you understand them better.",
            ),
            "hi": (
                "समूह में होने वाली बातें कभी-कभी आपकी नज़र से छूट जाती हैं। बातचीत में दूसरों की प्रतिक्रियाओं पर ध्यान देना आपको उन्हें बेहतर समझने में मदद करेगा।",
            ),
        },
        2: {
            "en": (
                "You read social situations well. Acting on what you notice can help others feel included.",
            ),
            "hi": (
                "आप सामाजिक परिस्थितियों को अच्छी तरह समझते हैं। जो आप देखते हैं उस पर अमल करना दूसरों को शामिल महसूस कराने में मदद कर सकता है।",
            ),
        },
        3: {
            "en": (
                "You notice how people are treated in a group and make room for every voice. This makes you a fair and thoughtful team member.",
            ),
            "hi": (
                "आप समूह में लोगों के साथ होने वाले व्यवहार पर ध्यान देते हैं और हर आवाज़ को जगह देते हैं। यह आपको एक निष्पक्ष और विचारशील साथी बनाता है।",
            ),
        },
    },
    Trait.COURAGE: {
        1: {
            "en": (
                "Standing up in difficult moments can feel risky. Even asking for help is a brave first step.",
            ),
            "hi": (
                "कठिन क्षणों में आवाज़ उठाना जोखिम भरा लग सकता है। मदद माँगना भी एक साहसी पहला कदम है।",
            ),
        },
        2: {
            "en": (
                "You feel it when something is wrong. Trusting that feeling and acting on it will grow your courage.",
            ),
            "hi": (
                "जब कुछ गलत होता है तो आप उसे महसूस करते हैं। उस भावना पर भरोसा करके कदम उठाने से आपका साहस बढ़ेगा।",
            ),
        },
        3: {
            "en": (
                "You stand up for what is right, calmly and wisely. Your courage protects others.",
            ),
            "hi": (
                "आप शांति और समझदारी से सही के पक्ष में खड़े होते हैं। आपका साहस दूसरों की रक्षा करता है।",
            ),
        },
    },
}

BUCKET_KEYS: Tuple[str, ...] = ("low", "medium", "high")

BUCKET_TEXT: Dict[str, Dict[str, str]] = {
    "low": {
        "en": "You are at the start of your journey in building social and emotional strengths. With small, steady steps in gratitude, empathy and connection with others, you can grow a great deal.",
        "hi": "आप सामाजिक और भावनात्मक क्षमताओं को विकसित करने की अपनी यात्रा की शुरुआत में हैं। कृतज्ञता, सहानुभूति और दूसरों से जुड़ाव में छोटे, नियमित कदमों से आप बहुत आगे बढ़ सकते हैं।",
    },
    "medium": {
        "en": "You show a balanced set of social and emotional strengths. Building on the areas where you already shine will help you handle life's challenges with even more confidence.",
        "hi": "आपमें सामाजिक और भावनात्मक क्षमताओं का संतुलित मेल है। जिन क्षेत्रों में आप पहले से अच्छे हैं, उन्हें और मज़बूत करना आपको जीवन की चुनौतियों का और अधिक आत्मविश्वास से सामना करने में मदद करेगा।",
    },
    "high": {
        "en": "You show strong social and emotional strengths. Your gratitude, resilience and care for others make you a positive influence on the people around you.",
        "hi": "आपमें मज़बूत सामाजिक और भावनात्मक क्षमताएँ हैं। आपकी कृतज्ञता, लचीलापन और दूसरों के प्रति परवाह आपको अपने आसपास के लोगों के लिए एक सकारात्मक प्रभाव बनाती है।",
    },
}

STRENGTHS_SENTENCE: Dict[str, str] = {
    "en": "Your strongest areas: {traits}.",
    "hi": "आपकी सबसे मज़बूत क्षमताएँ: {traits}।",
}

GENDERS: Tuple[str, ...] = ("Male", "Female", "Other", "Prefer not to say")
DEFAULT_GENDER = "Prefer not to say"

COPY: Dict[str, Dict[str, Dict[str, str] | str]] = {
    "en": {
        "site": {
            "title": "Anandak Assessment",
            "tagline": "A short self-assessment of social and emotional strengths",
            "footer": "Anandak, in collaboration with IIT Kharagpur.",
        },
        "language": {
            "title": "Select Language",
            "description": "Please choose your preferred language for the assessment.",
        },
        "user_info": {
            "title": "Your Details",
            "description": "Tell us a little about yourself before you begin.",
            "name_label": "Full Name",
            "name_placeholder": "Enter your full name",
            "name_hi_label": "Name in Hindi",
            "name_hi_placeholder": "Your name in Hindi",
            "age_label": "Age",
            "age_placeholder": "Your age",
            "gender_label": "Gender",
            "gender_Male": "Male",
            "gender_Female": "Female",
            "gender_Other": "Other",
            "gender_Prefer not to say": "Prefer not to say",
            "mobile_label": "Mobile Number",
            "mobile_placeholder": "Your mobile number",
            "email_label": "Email",
            "optional_label": "optional",
            "email_placeholder": "you@example.com",
            "state_label": "State / UT",
            "state_placeholder": "Select your state",
            "district_label": "District",
            "district_placeholder": "Select your district",
            "district_select_state_first": "Select a state first",
            "submit_button": "Continue",
        },
        "instructions": {
            "title": "Instructions",
            "text": "You will see six everyday situations. For each one, choose the response that is closest to what you would actually do. There are no right or wrong answers; answer honestly to get the most useful insight.",
            "begin_button": "Begin Assessment",
        },
        "assessment": {
            "title": "Assessment",
            "description": "Choose the option that best describes you.",
            "progress": "Question",
            "of": "of",
            "next_button": "Next",
            "finish_button": "Finish",
            "select_button": "Show feedback",
        },
        "results": {
            "title": "Assessment Complete",
            "description": "Thank you, {name}. Here is your insight.",
            "insight_title": "Your Insight",
            "total_score": "Total score",
            "certificate_message": "Your certificate is ready. You can view, print or download it.",
            "certificate_button": "View Certificate",
            "pdf_button": "Download PDF",
            "start_over": "Start Over",
            "dismiss": "Dismiss",
        },
        "cert": {
            "cert_title": "Certificate of Completion",
            "cert_presented_to": "This certificate is proudly presented to",
            "main_line": "This is to certify that {name} of {location} has successfully completed the Anandak Assessment on {date}.",
            "detailed_results": "Detailed Results",
            "score": "Score",
            "assessment_summary": "Assessment Summary",
            "issuing_authority_name": "Anandak",
            "issuing_authority": "Issuing Authority",
            "date_of_issue": "Date of Issue",
            "print_all": "Print Full Certificate",
            "print_en": "Print English Only",
            "print_hi": "Print Hindi Only",
            "back_home": "Back to Home",
        },
        "errors": {
            "selection_required_title": "Selection Required",
            "selection_required": "Please select an option before proceeding.",
            "invalid_language": "Please choose one of the offered languages.",
            "submission_failed": "Your assessment results could not be saved. Reason: {reason}",
            "font_missing": "The Hindi certificate PDF is unavailable on this server. Please use the print option instead.",
        },
        "validation": {
            "name": "Name must be at least 2 characters.",
            "name_hi": "Please enter your name in Hindi.",
            "age": "Please enter a valid age between 1 and 120.",
            "gender": "Please select your gender.",
            "country_code": "Please select country code.",
            "mobile": "Please enter a valid mobile number.",
            "email": "Please enter a valid email.",
            "state": "Please select your state/UT.",
            "district": "Please select a district from the selected state.",
        },
    },
    "hi": {
        "site": {
            "title": "आनंदक मूल्यांकन",
            "tagline": "सामाजिक और भावनात्मक क्षमताओं का एक छोटा स्व-मूल्यांकन",
            "footer": "आनंदक, आईआईटी खड़गपुर के सहयोग से।",
        },
        "language": {
            "title": "भाषा चुनें",
            "description": "कृपया मूल्यांकन के लिए अपनी पसंदीदा भाषा चुनें।",
        },
        "user_info": {
            "title": "आपका विवरण",
            "description": "शुरू करने से पहले हमें अपने बारे में थोड़ा बताएँ।",
            "name_label": "पूरा नाम (अंग्रेज़ी में)",
            "name_placeholder": "अपना पूरा नाम दर्ज करें",
            "name_hi_label": "हिंदी में नाम",
            "name_hi_placeholder": "हिंदी में आपका नाम",
            "age_label": "आयु",
            "age_placeholder": "आपकी आयु",
            "gender_label": "लिंग",
            "gender_Male": "पुरुष",
            "gender_Female": "महिला",
            "gender_Other": "अन्य",
            "gender_Prefer not to say": "बताना नहीं चाहते",
            "mobile_label": "मोबाइल नंबर",
            "mobile_placeholder": "आपका मोबाइल नंबर",
            "email_label": "ईमेल",
            "optional_label": "वैकल्पिक",
            "email_placeholder": "you@example.com",
            "state_label": "राज्य / केंद्र शासित प्रदेश",
            "state_placeholder": "अपना राज्य चुनें",
            "district_label": "ज़िला",
            "district_placeholder": "अपना ज़िला चुनें",
            "district_select_state_first": "पहले राज्य चुनें",
            "submit_button": "आगे बढ़ें",
        },
        "instructions": {
            "title": "निर्देश",
            "text": "आपको रोज़मर्रा की छह परिस्थितियाँ दिखाई जाएँगी। हर परिस्थिति के लिए वह उत्तर चुनें जो आपके वास्तविक व्यवहार के सबसे करीब हो। कोई भी उत्तर सही या गलत नहीं है; सबसे उपयोगी परिणाम के लिए ईमानदारी से उत्तर दें।",
            "begin_button": "मूल्यांकन शुरू करें",
        },
        "assessment": {
            "title": "मूल्यांकन",
            "description": "वह विकल्प चुनें जो आपका सबसे अच्छा वर्णन करता हो।",
            "progress": "प्रश्न",
            "of": "में से",
            "next_button": "अगला",
            "finish_button": "समाप्त करें",
            "select_button": "प्रतिक्रिया देखें",
        },
        "results": {
            "title": "मूल्यांकन पूरा हुआ",
            "description": "धन्यवाद, {name}। यह रहा आपका परिणाम।",
            "insight_title": "आपका परिणाम",
            "total_score": "कुल अंक",
            "certificate_message": "आपका प्रमाणपत्र तैयार है। आप इसे देख, प्रिंट या डाउनलोड कर सकते हैं।",
            "certificate_button": "प्रमाणपत्र देखें",
            "pdf_button": "पीडीएफ़ डाउनलोड करें",
            "start_over": "फिर से शुरू करें",
            "dismiss": "बंद करें",
        },
        "cert": {
            "cert_title": "समापन प्रमाणपत्र",
            "cert_presented_to": "यह प्रमाणपत्र गर्व के साथ प्रदान किया जाता है",
            "main_line": "यह प्रमाणित किया जाता है कि {name}, निवासी {location} ने दिनांक {date} को आनंदक मूल्यांकन सफलतापूर्वक पूरा किया है।",
            "detailed_results": "विस्तृत परिणाम",
            "score": "अंक",
            "assessment_summary": "मूल्यांकन सारांश",
            "issuing_authority_name": "आनंदक",
            "issuing_authority": "जारीकर्ता प्राधिकारी",
            "date_of_issue": "जारी करने की तिथि",
            "print_all": "पूरा प्रमाणपत्र प्रिंट करें",
            "print_en": "केवल अंग्रेज़ी प्रिंट करें",
            "print_hi": "केवल हिंदी प्रिंट करें",
            "back_home": "मुखपृष्ठ पर जाएँ",
        },
        "errors": {
            "selection_required_title": "चयन आवश्यक",
            "selection_required": "कृपया आगे बढ़ने से पहले एक विकल्प चुनें।",
            "invalid_language": "कृपया दी गई भाषाओं में से एक चुनें।",
            "submission_failed": "आपके मूल्यांकन परिणाम सहेजे नहीं जा सके। कारण: {reason}",
            "font_missing": "इस सर्वर पर हिंदी प्रमाणपत्र पीडीएफ़ उपलब्ध नहीं है। कृपया प्रिंट विकल्प का उपयोग करें।",
        },
        "validation": {
            "name": "नाम कम से कम 2 अक्षरों का होना चाहिए।",
            "name_hi": "कृपया हिंदी में नाम दर्ज करें।",
            "age": "कृपया 1 से 120 के बीच सही आयु दर्ज करें।",
            "gender": "कृपया अपना लिंग चुनें।",
            "country_code": "कृपया देश कोड चुनें।",
            "mobile": "कृपया सही मोबाइल नंबर दर्ज करें।",
            "email": "कृपया सही ईमेल दर्ज करें।",
            "state": "कृपया अपना राज्य/केंद्र शासित प्रदेश चुनें।",
            "district": "कृपया चुने गए राज्य का ज़िला चुनें।",
        },
    },
}


def resolve_language(value: str | None) -> str:
    if not value:
        return DEFAULT_LANGUAGE
    normalized = value.lower()
    return normalized if normalized in LANGUAGES else DEFAULT_LANGUAGE


def get_copy(language: str) -> Dict[str, Dict[str, str] | str]:
    return COPY.get(language, COPY[DEFAULT_LANGUAGE])


def trait_label(trait: Trait, language: str) -> str:
    return TRAIT_LABELS.get(language, TRAIT_LABELS[DEFAULT_LANGUAGE])[trait]


def verify_catalog(questions: Iterable[Question] = QUESTIONS) -> None:
    """Check the static tables for gaps; raises ``EngineInputError`` on the first one found."""
    seen_ids = set()
    for question in questions:
        if question.id in seen_ids:
            raise EngineInputError(f"Duplicate question id {question.id}")
        seen_ids.add(question.id)
        if sorted(question.scores) != list(SCORE_VALUES):
            raise EngineInputError(
                f"Question {question.id} must offer exactly one option per score {SCORE_VALUES}"
            )

    for trait in Trait:
        for language in LANGUAGES:
            if trait not in TRAIT_LABELS.get(language, {}):
                raise EngineInputError(f"Missing {language} label for trait {trait.value}")
            for score in SCORE_VALUES:
                variants = FEEDBACK.get(trait, {}).get(score, {}).get(language)
                if not variants or not all(variants):
                    raise EngineInputError(
                        f"Missing {language} feedback for {trait.value} at score {score}"
                    )

    for key in BUCKET_KEYS:
        for language in LANGUAGES:
            if not BUCKET_TEXT.get(key, {}).get(language):
                raise EngineInputError(f"Missing {language} text for bucket {key}")


verify_catalog()
