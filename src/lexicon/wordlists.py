"""Built-in word lists and rejection patterns used by the curator."""

import re
from typing import FrozenSet, List, Pattern


MIN_WORD_LENGTH = 2
MAX_WORD_LENGTH = 24

# Curated dictionaries at or below this size are not trusted for filtering
DEFAULT_HEALTH_THRESHOLD = 100

VOWELS_OR_Y = frozenset("AEIOUY")

# Very common digrams only; always present in a curated dictionary
COMMON_TWO_LETTER: FrozenSet[str] = frozenset({
    "AM", "AN", "AS", "AT", "BE", "BY", "DO", "GO", "HE", "IF", "IN", "IS", "IT",
    "ME", "MY", "NO", "OF", "ON", "OR", "OX", "SO", "TO", "UP", "US", "WE",
})

COMMON_THREE_LETTER: FrozenSet[str] = frozenset({
    "ACE", "ACT", "ADD", "AGE", "AIR", "ALL", "AND", "ANT", "ANY", "ARE", "ARM", "ART", "ASH", "ASK",
    "BAD", "BAG", "BAN", "BAR", "BAT", "BED", "BEE", "BEG", "BET", "BIG", "BIN", "BIT", "BOX", "BOY",
    "BUG", "BUS", "BUT",
    "CAB", "CAN", "CAP", "CAR", "CAT", "COP", "COT", "COW", "CRY", "CUP", "CUT",
    "DAD", "DAM", "DAY", "DEN", "DID", "DIE", "DIG", "DIN", "DOG", "DOT", "DRY", "DUE",
    "EAR", "EAT", "EEL", "EGG", "EGO", "ELF", "ELK", "ELM", "EMU", "END", "ERA", "EWE", "EYE",
    "FAN", "FAR", "FAT", "FEW", "FIG", "FIN", "FIT", "FIX", "FLY", "FOE", "FOG", "FOR", "FOX",
    "GAP", "GAS", "GEL", "GET", "GIG", "GIN", "GOD", "GOT", "GUM", "GUN", "GUT",
    "HAD", "HAS", "HAT", "HER", "HIM", "HIP", "HIS", "HIT", "HOG", "HOT", "HOW", "HUG", "HUM", "HUT",
    "ICE", "INK", "ION", "IRE", "IVY",
    "JAM", "JAR", "JET", "JOB", "JOG", "JOY", "JUG",
    "KEY", "KID", "KIN", "KIT",
    "LAD", "LAW", "LAY", "LED", "LEG", "LET", "LID", "LIE", "LIP", "LOG", "LOT", "LOW",
    "MAD", "MAN", "MAP", "MAT", "MEN", "MET", "MUD", "MUG",
    "NAB", "NAG", "NAP", "NET", "NEW", "NOD", "NOT", "NOW", "NUN", "NUT",
    "OAK", "OAR", "OAT", "ODD", "OFF", "ONE", "ORE", "OWL", "OWN",
    "PAD", "PAL", "PAN", "PAR", "PAT", "PAY", "PEA", "PEG", "PEN", "PEP", "PET", "PIG", "PIN", "PIT",
    "POD", "POP", "POT", "PRO", "PUT",
    "RAG", "RAM", "RAN", "RAP", "RAT", "RAW", "RAY", "RED", "RID", "RIG", "RIM", "RIP", "ROD", "ROE",
    "ROT", "ROW", "RUB", "RUG", "RUN",
    "SAD", "SAP", "SAT", "SAW", "SEA", "SEE", "SET", "SEW", "SHE", "SHY", "SIR", "SIT", "SKY", "SON",
    "SOY", "SPA", "SUM", "SUN",
    "TAB", "TAN", "TAP", "TAR", "TEA", "TEN", "THE", "TIN", "TIP", "TOE", "TON", "TOO", "TOP", "TOW",
    "TOY", "TRY", "TUB",
    "URN", "USE", "VAN", "VAT", "VET", "VIA",
    "WAR", "WAS", "WAX", "WAY", "WEB", "WED", "WET", "WHO", "WHY", "WIN", "WIT", "WOE", "WON",
    "YAK", "YAM", "YAP", "YAW", "YES", "YET", "YOU", "ZOO",
})

# Abbreviations, acronyms and interjections that show up in raw word lists.
# Entries that are also common words (RAM, SAT, US, ...) are left out on purpose:
# the whitelists above decide those.
_ABBREVIATIONS = {
    "TTY", "AET", "KEB", "CPU", "GPU", "ROM", "USB", "DVD", "LCD", "HDMI", "API", "URL",
    "HTML", "CSS", "JSON", "XML", "SQL", "HTTP", "FTP", "SSH", "TCP", "UDP", "VPN", "DNS", "SMTP",
    "PDF", "ZIP", "RAR", "EXE", "DLL", "SYS", "CMD", "TXT", "DOC", "XLS", "PPT",
    "CEO", "CFO", "CTO", "COO", "CIO", "EVP", "SVP", "VIP", "MBA", "PHD", "MD", "RN", "PA",
    "FBI", "CIA", "NSA", "IRS", "EPA", "FDA", "NASA", "NATO", "UN", "EU", "UK", "USA",
    "GMT", "UTC", "EST", "PST", "CST", "MST", "PDT", "EDT", "CDT", "MDT",
    "JAN", "FEB", "MAR", "APR", "JUN", "JUL", "AUG", "SEP", "OCT", "NOV", "DEC",
    "MON", "TUE", "THU", "FRI",
    "PM", "BC", "AD", "CE", "BCE",
    "ETC", "IE", "EG", "VS", "ASAP", "RSVP", "FAQ", "TBD", "TBA", "TBC",
    "FYI", "BTW", "IMO", "IMHO", "LOL", "OMG", "WTF", "BRB", "AFK", "IDK", "TBH", "DIY", "AKA",
    "ETA", "ETD",
    "QI", "XI", "XU", "QAT", "QOPH", "QADI", "QAID", "QANAT", "QWERTY", "ZZZ", "ZZS",
    "AAHS", "AALS", "BRR", "CWM", "HMM", "MMM", "SHH", "TSK", "UGH", "UMM",
    "JNR", "SNR", "MRS", "MR", "MS", "DR", "ST", "AVE", "BLVD", "RD", "LN", "CT", "PL", "SQ", "TER",
    "KG", "KM", "CM", "ML", "MG", "LB", "OZ", "FT", "YD", "MI", "MPH", "KPH",
    "ATM", "SIM", "SMS", "MMS", "GPS", "NFC", "WIFI", "CDMA", "GSM",
}
# Doubled letters (AA, BB, ...) are never words
_ABBREVIATIONS.update(letter * 2 for letter in "ABCDEFGHIJKLMNOPQRSTUVWXYZ")

COMMON_ABBREVIATIONS: FrozenSet[str] = frozenset(_ABBREVIATIONS - COMMON_TWO_LETTER - COMMON_THREE_LETTER)

CORPORATE_SUFFIXES: List[str] = [
    "ADVT", "LLC", "INC", "LTD", "CORP", "GMBH", "SRO", "PLC", "SRL", "PVT",
]

JUNK_PATTERNS: List[Pattern[str]] = [
    re.compile(r"[A-Z]{4,}[^AEIOUY]{4,}"),          # consonant cluster after a 4+ letter stem
    re.compile(r"^[BCDFGHJKLMNPQRSTVWXYZ]{3}$"),   # 3 letters, no vowel
    re.compile(r"^[BCDFGHJKLMNPQRSTVWXYZ]{4,}$"),  # 4+ letters, no vowel
    re.compile(r"[QXJ]{2,}"),                       # adjacent rare letters
    re.compile(r"(.)\1{2,}"),                       # AAA, BBB, ...
]

FALLBACK_SEED: List[str] = [
    "ON", "IN", "TO", "OF", "AT", "OR", "AS", "AN", "HE", "WE", "US",
    "CAT", "DOG", "BIRD", "NOSE", "EAR", "EACH", "ACHE", "LACE", "ACE", "CAUSE", "USE", "BECAUSE",
]
