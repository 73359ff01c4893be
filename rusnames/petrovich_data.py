# ═════════════════════════════════════════════════════════════════════════════════
# TWO-LAYER INFLECTION RULE SYSTEM
# ═════════════════════════════════════════════════════════════════════════════════
#
# Rules are authored per name part and applied in explicit precedence order:
# 1. EXCEPTIONS: whole-word irregular forms (loanwords, fleeting vowels, indeclinables)
# 2. SUFFIXES: endings matched by length, the longest matching ending wins
#
# Each rule lists five modifiers in case order: genitive, dative, accusative,
# instrumental, prepositional.
#
# Modifier notation:
#   "."      leave the word unchanged
#   "--ого"  drop two trailing letters, then append "ого"
#   "у"      append "у" without dropping anything
#
# The only tag is "first_word": an exception carrying it is skipped when the word
# is the last component of a hyphenated name (Бонч-Бруевич, Тер-Петросян).
# ═════════════════════════════════════════════════════════════════════════════════

from types import MappingProxyType

_UNCHANGED = [".", ".", ".", ".", "."]

# Layer 1 + 2 for surnames
LASTNAME_RULES = {
    "exceptions": [
        # Qualifier words of compound surnames, indeclinable unless they head the compound
        {
            "gender": "androgynous",
            "test": [
                "бонч",
                "абдул",
                "белиц",
                "гасан",
                "дюссар",
                "дюмон",
                "книппер",
                "корвин",
                "ван",
                "шолом",
                "тер",
                "призван",
                "мелик",
                "вар",
                "фон",
            ],
            "mods": _UNCHANGED,
            "tags": ["first_word"],
        },
        # French surnames with stress on the final vowel
        {
            "gender": "androgynous",
            "test": ["дюма", "тома", "дега", "люка", "ферма", "гамарра", "петипа", "шандра", "скаля", "каруана"],
            "mods": _UNCHANGED,
        },
        # Surnames that coincide with common nouns and are kept intact
        {
            "gender": "androgynous",
            "test": ["гусь", "ремень", "камень", "онук", "богода", "нечипас", "долгопалец", "маненок", "рева", "кива"],
            "mods": _UNCHANGED,
        },
        {
            "gender": "androgynous",
            "test": ["вий", "сой", "цой", "хой"],
            "mods": ["-я", "-ю", "-я", "-ем", "-е"],
        },
    ],
    "suffixes": [
        # Feminine surnames ending in a consonant do not decline
        {
            "gender": "female",
            "test": [
                "б",
                "в",
                "г",
                "д",
                "ж",
                "з",
                "й",
                "к",
                "л",
                "м",
                "н",
                "п",
                "р",
                "с",
                "т",
                "ф",
                "х",
                "ц",
                "ч",
                "ш",
                "щ",
                "ъ",
                "ь",
            ],
            "mods": _UNCHANGED,
        },
        {"gender": "androgynous", "test": ["гава", "орота"], "mods": _UNCHANGED},
        {"gender": "female", "test": ["ска", "цка"], "mods": ["-ой", "-ой", "-ую", "-ой", "-ой"]},
        {"gender": "female", "test": ["цкая", "ская", "ная", "ая"], "mods": ["--ой", "--ой", "--ую", "--ой", "--ой"]},
        {"gender": "female", "test": ["яя"], "mods": ["--ей", "--ей", "--юю", "--ей", "--ей"]},
        {"gender": "female", "test": ["на"], "mods": ["-ой", "-ой", "-у", "-ой", "-ой"]},
        {"gender": "female", "test": ["ова", "ева", "ёва"], "mods": ["-ой", "-ой", "-у", "-ой", "-ой"]},
        {"gender": "male", "test": ["уй"], "mods": ["-я", "-ю", "-я", "-ем", "-е"]},
        {"gender": "androgynous", "test": ["ца"], "mods": ["-ы", "-е", "-у", "-ей", "-е"]},
        {"gender": "male", "test": ["рих"], "mods": ["а", "у", "а", "ом", "е"]},
        # Georgian and Abkhazian surnames
        {"gender": "androgynous", "test": ["ия"], "mods": _UNCHANGED},
        {"gender": "androgynous", "test": ["иа", "аа", "оа", "уа", "ыа", "еа", "юа", "эа"], "mods": _UNCHANGED},
        # Old genitive plural forms (Черных, Седых)
        {"gender": "male", "test": ["их", "ых"], "mods": _UNCHANGED},
        # Ukrainian -ко and foreign vowel endings
        {"gender": "androgynous", "test": ["о", "е", "э", "и", "ы", "у", "ю"], "mods": _UNCHANGED},
        {"gender": "androgynous", "test": ["га", "ка", "ха"], "mods": ["-и", "-е", "-у", "-ой", "-е"]},
        {"gender": "androgynous", "test": ["ча", "ща", "жа", "ша"], "mods": ["-и", "-е", "-у", "-ей", "-е"]},
        {"gender": "androgynous", "test": ["а"], "mods": ["-ы", "-е", "-у", "-ой", "-е"]},
        {"gender": "androgynous", "test": ["я"], "mods": ["-и", "-е", "-ю", "-ей", "-е"]},
        {"gender": "male", "test": ["ь"], "mods": ["-я", "-ю", "-я", "-ем", "-е"]},
        {"gender": "male", "test": ["ей", "ай", "й"], "mods": ["-я", "-ю", "-я", "-ем", "-е"]},
        {"gender": "male", "test": ["ян", "ан", "йн"], "mods": ["а", "у", "а", "ом", "е"]},
        {"gender": "male", "test": ["гой", "кой", "хой"], "mods": ["-го", "-му", "-го", "--им", "-м"]},
        {"gender": "male", "test": ["ой"], "mods": ["-го", "-му", "-го", "--ым", "-м"]},
        {"gender": "male", "test": ["ший", "щий", "жий", "чий", "ний"], "mods": ["--его", "--ему", "--его", "-м", "--ем"]},
        {"gender": "male", "test": ["кий", "гий", "хий"], "mods": ["--ого", "--ому", "--ого", "-м", "--ом"]},
        {"gender": "male", "test": ["ый"], "mods": ["--ого", "--ому", "--ого", "-м", "--ом"]},
        {"gender": "male", "test": ["ий"], "mods": ["-я", "-ю", "-я", "-ем", "-и"]},
        {"gender": "male", "test": ["ок"], "mods": ["--ка", "--ку", "--ка", "--ком", "--ке"]},
        {"gender": "male", "test": ["ец"], "mods": ["--ца", "--цу", "--ца", "--цом", "--це"]},
        {"gender": "male", "test": ["ов", "ев", "ёв", "ин", "ын"], "mods": ["а", "у", "а", "ым", "е"]},
        {"gender": "male", "test": ["ж", "ц", "ч", "ш", "щ"], "mods": ["а", "у", "а", "ем", "е"]},
        {
            "gender": "male",
            "test": ["б", "в", "г", "д", "з", "к", "л", "м", "н", "п", "р", "с", "т", "ф", "х"],
            "mods": ["а", "у", "а", "ом", "е"],
        },
    ],
}

# Layer 1 + 2 for given names
FIRSTNAME_RULES = {
    "exceptions": [
        {"gender": "male", "test": ["лев"], "mods": ["--ьва", "--ьву", "--ьва", "--ьвом", "--ьве"]},
        {"gender": "male", "test": ["пётр", "петр"], "mods": ["---етра", "---етру", "---етра", "---етром", "---етре"]},
        {"gender": "male", "test": ["павел"], "mods": ["--ла", "--лу", "--ла", "--лом", "--ле"]},
        {"gender": "male", "test": ["илья"], "mods": ["-и", "-е", "-ю", "-ёй", "-е"]},
        {"gender": "male", "test": ["шота"], "mods": _UNCHANGED},
        # French feminine names ending in a soft sign stay indeclinable
        {
            "gender": "female",
            "test": ["рашель", "нинель", "николь", "габриэль", "даниэль", "изабель", "жизель"],
            "mods": _UNCHANGED,
        },
    ],
    "suffixes": [
        {"gender": "androgynous", "test": ["е", "ё", "и", "о", "у", "ы", "э", "ю"], "mods": _UNCHANGED},
        {
            "gender": "female",
            "test": [
                "б",
                "в",
                "г",
                "д",
                "ж",
                "з",
                "й",
                "к",
                "л",
                "м",
                "н",
                "п",
                "р",
                "с",
                "т",
                "ф",
                "х",
                "ц",
                "ч",
                "ш",
                "щ",
                "ъ",
            ],
            "mods": _UNCHANGED,
        },
        {"gender": "female", "test": ["ь"], "mods": ["-и", "-и", ".", "ю", "-и"]},
        {"gender": "male", "test": ["ь"], "mods": ["-я", "-ю", "-я", "-ем", "-е"]},
        {"gender": "androgynous", "test": ["га", "ка", "ха"], "mods": ["-и", "-е", "-у", "-ой", "-е"]},
        {"gender": "androgynous", "test": ["ча", "ща", "жа", "ша"], "mods": ["-и", "-е", "-у", "-ей", "-е"]},
        {"gender": "androgynous", "test": ["а"], "mods": ["-ы", "-е", "-у", "-ой", "-е"]},
        {"gender": "androgynous", "test": ["ия"], "mods": ["-и", "-и", "-ю", "-ей", "-и"]},
        {"gender": "androgynous", "test": ["я"], "mods": ["-и", "-е", "-ю", "-ей", "-е"]},
        {"gender": "male", "test": ["ий"], "mods": ["-я", "-ю", "-я", "-ем", "-и"]},
        {"gender": "male", "test": ["й"], "mods": ["-я", "-ю", "-я", "-ем", "-е"]},
        {"gender": "male", "test": ["ж", "ц", "ч", "ш", "щ"], "mods": ["а", "у", "а", "ем", "е"]},
        {
            "gender": "male",
            "test": ["б", "в", "г", "д", "з", "к", "л", "м", "н", "п", "р", "с", "т", "ф", "х"],
            "mods": ["а", "у", "а", "ом", "е"],
        },
    ],
}

# Layer 1 + 2 for patronymics
MIDDLENAME_RULES = {
    "exceptions": [
        # Stressed final syllable takes -ом in the instrumental
        {"gender": "male", "test": ["ильич", "кузьмич", "лукич", "фомич"], "mods": ["а", "у", "а", "ом", "е"]},
    ],
    "suffixes": [
        {"gender": "male", "test": ["ич"], "mods": ["а", "у", "а", "ем", "е"]},
        {"gender": "female", "test": ["на"], "mods": ["-ы", "-е", "-у", "-ой", "-е"]},
        # Turkic patronymic particles
        {"gender": "androgynous", "test": ["оглы", "кызы", "гызы", "улы", "уулу"], "mods": _UNCHANGED},
    ],
}

RULE_DEFINITIONS = MappingProxyType(
    {
        "lastname": LASTNAME_RULES,
        "firstname": FIRSTNAME_RULES,
        "middlename": MIDDLENAME_RULES,
    }
)


# ═════════════════════════════════════════════════════════════════════════════════
# GENDER HEURISTICS
# ═════════════════════════════════════════════════════════════════════════════════
#
# Per name part: optional whole-word exceptions, then endings. Within a layer the
# sets are consulted androgynous -> female -> male; an androgynous hit means the
# part carries no gender signal and detection moves on to the next part.

GENDER_DEFINITIONS = MappingProxyType(
    {
        "lastname": {
            "suffixes": {
                "female": ["ова", "ева", "ёва", "ина", "ына", "ая", "яя", "ска", "цка"],
                "male": ["ов", "ев", "ёв", "ин", "ын", "ий", "ый", "ой", "их", "ых"],
            },
        },
        "firstname": {
            "exceptions": {
                "androgynous": ["саша", "женя", "валя", "шура", "слава", "ким", "мишель", "сева", "ия"],
                "female": [
                    "любовь",
                    "нинель",
                    "рашель",
                    "николь",
                    "юдифь",
                    "эсфирь",
                    "руфь",
                    "адель",
                    "ассоль",
                    "габриэль",
                    "даниэль",
                    "изабель",
                    "жизель",
                    "мари",
                    "нелли",
                    "элли",
                    "софи",
                    "натали",
                    "агнес",
                    "кармен",
                    "ирэн",
                    "эллен",
                    "рут",
                ],
                "male": [
                    "никита",
                    "илья",
                    "фома",
                    "лука",
                    "кузьма",
                    "савва",
                    "фока",
                    "данила",
                    "гаврила",
                    "никола",
                    "иона",
                    "муса",
                    "иса",
                    "шота",
                    "миша",
                    "паша",
                    "гоша",
                    "лёша",
                    "леша",
                    "яша",
                    "гриша",
                    "вова",
                    "дима",
                    "жора",
                    "юра",
                    "петя",
                    "коля",
                    "толя",
                    "ваня",
                    "федя",
                    "вася",
                    "митя",
                    "сеня",
                    "боря",
                    "костя",
                    "лёва",
                    "лева",
                ],
            },
            "suffixes": {
                "androgynous": ["улла"],
                "female": ["а", "я"],
                "male": [
                    "б",
                    "в",
                    "г",
                    "д",
                    "ж",
                    "з",
                    "й",
                    "к",
                    "л",
                    "м",
                    "н",
                    "п",
                    "р",
                    "с",
                    "т",
                    "ф",
                    "х",
                    "ц",
                    "ч",
                    "ш",
                    "щ",
                    "ь",
                ],
            },
        },
        "middlename": {
            "suffixes": {
                "female": ["на", "кызы", "гызы"],
                "male": ["ич", "оглы", "улы", "уулу"],
            },
        },
    }
)
