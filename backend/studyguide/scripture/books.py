"""Static book-name tables for every supported locale.

Pure data. ``registry.py`` turns these into checked, immutable lookup tables;
nothing here is consulted directly at request time.
"""

from __future__ import annotations

# Canonical names, 39 OT + 27 NT, in biblical order.
CANONICAL_BOOKS: dict[str, tuple[str, ...]] = {
    "en-US": (
        # Old Testament
        "Genesis", "Exodus", "Leviticus", "Numbers", "Deuteronomy",
        "Joshua", "Judges", "Ruth", "1 Samuel", "2 Samuel", "1 Kings", "2 Kings",
        "1 Chronicles", "2 Chronicles", "Ezra", "Nehemiah", "Esther", "Job",
        "Psalms", "Proverbs", "Ecclesiastes", "Song of Solomon", "Isaiah",
        "Jeremiah", "Lamentations", "Ezekiel", "Daniel", "Hosea", "Joel", "Amos",
        "Obadiah", "Jonah", "Micah", "Nahum", "Habakkuk", "Zephaniah", "Haggai",
        "Zechariah", "Malachi",
        # New Testament
        "Matthew", "Mark", "Luke", "John", "Acts", "Romans",
        "1 Corinthians", "2 Corinthians", "Galatians", "Ephesians", "Philippians",
        "Colossians", "1 Thessalonians", "2 Thessalonians", "1 Timothy", "2 Timothy",
        "Titus", "Philemon", "Hebrews", "James", "1 Peter", "2 Peter",
        "1 John", "2 John", "3 John", "Jude", "Revelation",
    ),
    # Indian Revised Version Hindi 2019 book names.
    "hi-IN": (
        "उत्पत्ति", "निर्गमन", "लैव्यव्यवस्था", "गिनती", "व्यवस्थाविवरण",
        "यहोशू", "न्यायियों", "रूत", "1 शमूएल", "2 शमूएल", "1 राजाओं", "2 राजाओं",
        "1 इतिहास", "2 इतिहास", "एज्रा", "नहेम्याह", "एस्तेर", "अय्यूब",
        "भजन संहिता", "नीतिवचन", "सभोपदेशक", "श्रेष्ठगीत", "यशायाह",
        "यिर्मयाह", "विलापगीत", "यहेजकेल", "दानिय्येल", "होशे", "योएल", "आमोस",
        "ओबद्याह", "योना", "मीका", "नहूम", "हबक्कूक", "सपन्याह", "हाग्गै",
        "जकर्याह", "मलाकी",
        "मत्ती", "मरकुस", "लूका", "यूहन्ना", "प्रेरितों के काम", "रोमियों",
        "1 कुरिन्थियों", "2 कुरिन्थियों", "गलातियों", "इफिसियों", "फिलिप्पियों",
        "कुलुस्सियों", "1 थिस्सलुनीकियों", "2 थिस्सलुनीकियों", "1 तीमुथियुस", "2 तीमुथियुस",
        "तीतुस", "फिलेमोन", "इब्रानियों", "याकूब", "1 पतरस", "2 पतरस",
        "1 यूहन्ना", "2 यूहन्ना", "3 यूहन्ना", "यहूदा", "प्रकाशितवाक्य",
    ),
    # Indian Revised Version Malayalam 2025 uses abbreviated forms, most with
    # a trailing period that is part of the canonical name.
    "ml-IN": (
        "ഉല്പ.", "പുറ.", "ലേവ്യ.", "സംഖ്യ.", "ആവർ.",
        "യോശുവ", "ന്യായാ.", "രൂത്ത്", "1 ശമു.", "2 ശമു.",
        "1 രാജാ.", "2 രാജാ.", "1 ദിന.", "2 ദിന.",
        "എസ്രാ", "നെഹെ.", "എസ്ഥേ.", "ഇയ്യോ.", "സങ്കീ.", "സദൃ.",
        "സഭാ.", "ഉത്ത.", "യെശ.", "യിരെ.", "വിലാ.",
        "യെഹെ.", "ദാനീ.", "ഹോശേ.", "യോവേ.", "ആമോ.", "ഓബ.",
        "യോനാ", "മീഖാ", "നഹൂം", "ഹബ.", "സെഫ.", "ഹഗ്ഗാ.",
        "സെഖ.", "മലാ.",
        "മത്താ.", "മർക്കൊ.", "ലൂക്കൊ.", "യോഹ.", "പ്രവൃത്തികൾ", "റോമ.",
        "1 കൊരി.", "2 കൊരി.", "ഗലാ.", "എഫെ.", "ഫിലി.",
        "കൊലൊ.", "1 തെസ്സ.", "2 തെസ്സ.", "1 തിമൊ.", "2 തിമൊ.",
        "തീത്തൊ.", "ഫിലേ.", "എബ്രാ.", "യാക്കോ.", "1 പത്രൊ.", "2 പത്രൊ.",
        "1 യോഹ.", "2 യോഹ.", "3 യോഹ.", "യൂദാ", "വെളി.",
    ),
}

# Character ranges (regex class fragments) that make up book-name letters in
# each locale. Latin is always allowed so English references inside Hindi or
# Malayalam prose are still picked up. Digits and dandas are left out.
LATIN_LETTERS = "A-Za-z\u00C0-\u00D6\u00D8-\u00F6\u00F8-\u024F"
DEVANAGARI_LETTERS = "\u0900-\u0963\u0971-\u097F"
MALAYALAM_LETTERS = "\u0D00-\u0D65\u0D7A-\u0D7F"
JOINERS = "\u200C\u200D"

SCRIPT_LETTERS: dict[str, str] = {
    "en-US": LATIN_LETTERS,
    "hi-IN": LATIN_LETTERS + DEVANAGARI_LETTERS + JOINERS,
    "ml-IN": LATIN_LETTERS + MALAYALAM_LETTERS + JOINERS,
}

# Ordinal styles used to generate numbered-book aliases ("1st John", "First John").
ORDINAL_WORDS: dict[str, dict[str, tuple[str, ...]]] = {
    "en-US": {
        "1": ("1st", "First"),
        "2": ("2nd", "Second"),
        "3": ("3rd", "Third"),
    },
}

# Hand-declared aliases. Numeral styles for English numbered books are
# generated in registry.py and do not need to be listed here.
INCORRECT_TO_CORRECT: dict[str, dict[str, str]] = {
    "en-US": {
        "Gen": "Genesis", "Ge": "Genesis", "Gn": "Genesis",
        "Ex": "Exodus", "Exod": "Exodus", "Exo": "Exodus",
        "Lev": "Leviticus", "Le": "Leviticus", "Lv": "Leviticus",
        "Num": "Numbers", "Nu": "Numbers", "Nm": "Numbers", "Nb": "Numbers",
        "Deut": "Deuteronomy", "Dt": "Deuteronomy", "De": "Deuteronomy",
        "Josh": "Joshua", "Jos": "Joshua", "Jsh": "Joshua",
        "Judg": "Judges", "Jdg": "Judges", "Jg": "Judges", "Jdgs": "Judges",
        "Ru": "Ruth", "Rth": "Ruth",
        "1 Sam": "1 Samuel", "1Sam": "1 Samuel", "1Sa": "1 Samuel", "1 Sa": "1 Samuel",
        "1 S": "1 Samuel", "1S": "1 Samuel",
        "2 Sam": "2 Samuel", "2Sam": "2 Samuel", "2Sa": "2 Samuel", "2 Sa": "2 Samuel",
        "2 S": "2 Samuel", "2S": "2 Samuel",
        "1 Kgs": "1 Kings", "1Kgs": "1 Kings", "1Ki": "1 Kings", "1 Ki": "1 Kings",
        "1 K": "1 Kings", "1K": "1 Kings",
        "2 Kgs": "2 Kings", "2Kgs": "2 Kings", "2Ki": "2 Kings", "2 Ki": "2 Kings",
        "2 K": "2 Kings", "2K": "2 Kings",
        "1 Chr": "1 Chronicles", "1Chr": "1 Chronicles", "1Ch": "1 Chronicles", "1 Ch": "1 Chronicles",
        "2 Chr": "2 Chronicles", "2Chr": "2 Chronicles", "2Ch": "2 Chronicles", "2 Ch": "2 Chronicles",
        "Ezr": "Ezra", "Ez": "Ezra",
        "Neh": "Nehemiah", "Ne": "Nehemiah",
        "Est": "Esther", "Esth": "Esther", "Es": "Esther",
        "Jb": "Job",
        "Ps": "Psalms", "Psa": "Psalms", "Psalm": "Psalms", "Pss": "Psalms", "Psm": "Psalms",
        "Prov": "Proverbs", "Pr": "Proverbs", "Pro": "Proverbs", "Prv": "Proverbs",
        "Eccl": "Ecclesiastes", "Ec": "Ecclesiastes", "Ecc": "Ecclesiastes",
        "Song": "Song of Solomon", "SoS": "Song of Solomon", "SS": "Song of Solomon",
        "So": "Song of Solomon", "Song of Songs": "Song of Solomon",
        "Isa": "Isaiah", "Is": "Isaiah",
        "Jer": "Jeremiah", "Je": "Jeremiah", "Jr": "Jeremiah",
        "Lam": "Lamentations", "La": "Lamentations",
        "Ezek": "Ezekiel", "Eze": "Ezekiel", "Ezk": "Ezekiel",
        "Dan": "Daniel", "Da": "Daniel", "Dn": "Daniel",
        "Hos": "Hosea", "Ho": "Hosea",
        "Joe": "Joel", "Jl": "Joel",
        "Am": "Amos",
        "Obad": "Obadiah", "Ob": "Obadiah",
        "Jon": "Jonah", "Jnh": "Jonah",
        "Mic": "Micah", "Mc": "Micah",
        "Nah": "Nahum", "Na": "Nahum",
        "Hab": "Habakkuk", "Hb": "Habakkuk",
        "Zeph": "Zephaniah", "Zep": "Zephaniah", "Zp": "Zephaniah",
        "Hag": "Haggai", "Hg": "Haggai",
        "Zech": "Zechariah", "Zec": "Zechariah", "Zc": "Zechariah",
        "Mal": "Malachi", "Ml": "Malachi",
        "Matt": "Matthew", "Mt": "Matthew",
        "Mk": "Mark", "Mr": "Mark",
        "Lk": "Luke", "Luk": "Luke",
        "Jn": "John", "Joh": "John",
        "Ac": "Acts",
        "Rom": "Romans", "Ro": "Romans", "Rm": "Romans",
        "1 Cor": "1 Corinthians", "1Cor": "1 Corinthians", "1Co": "1 Corinthians", "1 Co": "1 Corinthians",
        "2 Cor": "2 Corinthians", "2Cor": "2 Corinthians", "2Co": "2 Corinthians", "2 Co": "2 Corinthians",
        "Gal": "Galatians", "Ga": "Galatians",
        "Eph": "Ephesians", "Ep": "Ephesians",
        "Phil": "Philippians", "Php": "Philippians", "Pp": "Philippians",
        "Col": "Colossians", "Co": "Colossians",
        "1 Thess": "1 Thessalonians", "1Thess": "1 Thessalonians", "1Th": "1 Thessalonians",
        "1 Th": "1 Thessalonians", "1Ts": "1 Thessalonians",
        "2 Thess": "2 Thessalonians", "2Thess": "2 Thessalonians", "2Th": "2 Thessalonians",
        "2 Th": "2 Thessalonians", "2Ts": "2 Thessalonians",
        "1 Tim": "1 Timothy", "1Tim": "1 Timothy", "1Ti": "1 Timothy", "1 Ti": "1 Timothy", "1Tm": "1 Timothy",
        "2 Tim": "2 Timothy", "2Tim": "2 Timothy", "2Ti": "2 Timothy", "2 Ti": "2 Timothy", "2Tm": "2 Timothy",
        "Tit": "Titus", "Ti": "Titus",
        "Phlm": "Philemon", "Phm": "Philemon", "Pm": "Philemon",
        "Heb": "Hebrews", "He": "Hebrews",
        "Jas": "James", "Jm": "James",
        "1 Pet": "1 Peter", "1Pet": "1 Peter", "1Pe": "1 Peter", "1 Pe": "1 Peter", "1Pt": "1 Peter", "1P": "1 Peter",
        "2 Pet": "2 Peter", "2Pet": "2 Peter", "2Pe": "2 Peter", "2 Pe": "2 Peter", "2Pt": "2 Peter", "2P": "2 Peter",
        "1 Jn": "1 John", "1Jn": "1 John", "1Jo": "1 John", "1 Jo": "1 John", "1J": "1 John",
        "2 Jn": "2 John", "2Jn": "2 John", "2Jo": "2 John", "2 Jo": "2 John", "2J": "2 John",
        "3 Jn": "3 John", "3Jn": "3 John", "3Jo": "3 John", "3 Jo": "3 John", "3J": "3 John",
        "Jud": "Jude", "Jd": "Jude",
        "Rev": "Revelation", "Re": "Revelation", "Rv": "Revelation", "Revelations": "Revelation",
        "The Revelation": "Revelation",
        "The Gospel of John": "John",
        "The Gospel of Matthew": "Matthew",
        "The Gospel of Mark": "Mark",
        "The Gospel of Luke": "Luke",
        "Acts of the Apostles": "Acts",
    },
    "hi-IN": {
        "भज": "भजन संहिता",
        "भजन": "भजन संहिता",
        "प्रेरितों": "प्रेरितों के काम",
        "पहला शमूएल": "1 शमूएल",
        "दूसरा शमूएल": "2 शमूएल",
        "पहला राजाओं": "1 राजाओं",
        "दूसरा राजाओं": "2 राजाओं",
        "पहला इतिहास": "1 इतिहास",
        "दूसरा इतिहास": "2 इतिहास",
        "पहला कुरिन्थियों": "1 कुरिन्थियों",
        "दूसरा कुरिन्थियों": "2 कुरिन्थियों",
        "पहला थिस्सलुनीकियों": "1 थिस्सलुनीकियों",
        "दूसरा थिस्सलुनीकियों": "2 थिस्सलुनीकियों",
        "पहला तीमुथियुस": "1 तीमुथियुस",
        "दूसरा तीमुथियुस": "2 तीमुथियुस",
        "पहला पतरस": "1 पतरस",
        "दूसरा पतरस": "2 पतरस",
        "पहला यूहन्ना": "1 यूहन्ना",
        "दूसरा यूहन्ना": "2 यूहन्ना",
        "तीसरा यूहन्ना": "3 यूहन्ना",
        # halant spelling the model produces often
        "मर्कुस": "मरकुस",
        "नहेमायाह": "नहेम्याह",
        "1 राजा": "1 राजाओं",
        "2 राजा": "2 राजाओं",
        "रोमियो": "रोमियों",
    },
    "ml-IN": {
        # Full forms to the abbreviated canonical forms.
        "ഉല്പത്തി": "ഉല്പ.",
        "പുറപ്പാട്": "പുറ.",
        "ലേവ്യപുസ്തകം": "ലേവ്യ.",
        "സംഖ്യാപുസ്തകം": "സംഖ്യ.",
        "ആവർത്തനം": "ആവർ.",
        "ആവർത്തനപുസ്തകം": "ആവർ.",
        "ന്യായാധിപന്മാർ": "ന്യായാ.",
        "1 ശമൂവേൽ": "1 ശമു.",
        "2 ശമൂവേൽ": "2 ശമു.",
        "1 രാജാക്കന്മാർ": "1 രാജാ.",
        "2 രാജാക്കന്മാർ": "2 രാജാ.",
        "1 ദിനവൃത്താന്തം": "1 ദിന.",
        "2 ദിനവൃത്താന്തം": "2 ദിന.",
        "നെഹെമ്യാവ്": "നെഹെ.",
        "എസ്ഥേർ": "എസ്ഥേ.",
        "ഇയ്യോബ്": "ഇയ്യോ.",
        "സങ്കീർത്തനങ്ങൾ": "സങ്കീ.",
        "സങ്കീർത്തനം": "സങ്കീ.",
        "സദൃശവാക്യങ്ങൾ": "സദൃ.",
        "സഭാപ്രസംഗി": "സഭാ.",
        "ഉത്തമഗീതം": "ഉത്ത.",
        "യശായാ": "യെശ.",
        "യെശയ്യാവ്": "യെശ.",
        "യിരെമ്യാവ്": "യിരെ.",
        "വിലാപങ്ങൾ": "വിലാ.",
        "യെഹെസ്കേൽ": "യെഹെ.",
        "ദാനിയേൽ": "ദാനീ.",
        "ഹോശേയ": "ഹോശേ.",
        "യോവേൽ": "യോവേ.",
        "ആമോസ്": "ആമോ.",
        "ഓബദ്യാവ്": "ഓബ.",
        "ഹബക്കൂക്ക്": "ഹബ.",
        "സെഫന്യാവ്": "സെഫ.",
        "ഹഗ്ഗായി": "ഹഗ്ഗാ.",
        "സെഖര്യാവ്": "സെഖ.",
        "മലാഖി": "മലാ.",
        "മത്തായി": "മത്താ.",
        "മർക്കൊസ്": "മർക്കൊ.",
        "മർക്കോസ്": "മർക്കൊ.",
        "ലൂക്കൊസ്": "ലൂക്കൊ.",
        "ലൂക്കോസ്": "ലൂക്കൊ.",
        "യോഹന്നാൻ": "യോഹ.",
        "അപ്പൊസ്തലപ്രവൃത്തികൾ": "പ്രവൃത്തികൾ",
        "അപ്പൊസ്തലന്മാരുടെ പ്രവൃത്തികൾ": "പ്രവൃത്തികൾ",
        "റോമാക്കാർ": "റോമ.",
        "റോമർ": "റോമ.",
        "1 കൊരിന്ത്യർ": "1 കൊരി.",
        "2 കൊരിന്ത്യർ": "2 കൊരി.",
        "ഗലാത്യർ": "ഗലാ.",
        "എഫെസ്യർ": "എഫെ.",
        "എഫേസ്യർ": "എഫെ.",
        "ഫിലിപ്പിയർ": "ഫിലി.",
        "കൊലൊസ്സ്യർ": "കൊലൊ.",
        "1 തെസ്സലൊനീക്യർ": "1 തെസ്സ.",
        "2 തെസ്സലൊനീക്യർ": "2 തെസ്സ.",
        "1 തിമൊഥെയൊസ്": "1 തിമൊ.",
        "2 തിമൊഥെയൊസ്": "2 തിമൊ.",
        "തീത്തൊസ്": "തീത്തൊ.",
        "ഫിലേമോൻ": "ഫിലേ.",
        "എബ്രായർ": "എബ്രാ.",
        "യാക്കോബ്": "യാക്കോ.",
        "1 പത്രൊസ്": "1 പത്രൊ.",
        "2 പത്രൊസ്": "2 പത്രൊ.",
        "1 പത്രോസ്": "1 പത്രൊ.",
        "2 പത്രോസ്": "2 പത്രൊ.",
        "1 യോഹന്നാൻ": "1 യോഹ.",
        "2 യോഹന്നാൻ": "2 യോഹ.",
        "3 യോഹന്നാൻ": "3 യോഹ.",
        "വെളിപ്പാട്": "വെളി.",
        # Word-based numerals.
        "ഒന്നാം ശമൂവേൽ": "1 ശമു.",
        "രണ്ടാം ശമൂവേൽ": "2 ശമു.",
        "ഒന്നാം രാജാക്കന്മാർ": "1 രാജാ.",
        "രണ്ടാം രാജാക്കന്മാർ": "2 രാജാ.",
        "ഒന്നാം കൊരിന്ത്യർ": "1 കൊരി.",
        "രണ്ടാം കൊരിന്ത്യർ": "2 കൊരി.",
        "ഒന്നാം തെസ്സലൊനീക്യർ": "1 തെസ്സ.",
        "രണ്ടാം തെസ്സലൊനീക്യർ": "2 തെസ്സ.",
        "ഒന്നാം തിമൊഥെയൊസ്": "1 തിമൊ.",
        "രണ്ടാം തിമൊഥെയൊസ്": "2 തിമൊ.",
        "ഒന്നാം പത്രൊസ്": "1 പത്രൊ.",
        "രണ്ടാം പത്രൊസ്": "2 പത്രൊ.",
        "ഒന്നാം യോഹന്നാൻ": "1 യോഹ.",
        "രണ്ടാം യോഹന്നാൻ": "2 യോഹ.",
        "മൂന്നാം യോഹന്നാൻ": "3 യോഹ.",
    },
}

# Aliases that are also everyday words. A chapter-only match on one of these
# ("So 5 of them went") is prose, not a reference.
PROSE_WORDS: dict[str, frozenset[str]] = {
    "en-US": frozenset({
        "Am", "Co", "Da", "Dan", "De", "Ex", "Ga", "He", "Ho", "Is", "Je", "Joe", "Jon",
        "La", "Le", "Mr", "Na", "Ne", "Ob", "Re", "Ro", "So", "Song", "Ti",
    }),
}

# Full localized display names keyed by the English canonical book.
HINDI_BOOK_NAMES: dict[str, str] = {
    "Genesis": "उत्पत्ति", "Exodus": "निर्गमन", "Leviticus": "लैव्यव्यवस्था", "Numbers": "गिनती", "Deuteronomy": "व्यवस्थाविवरण",
    "Joshua": "यहोशू", "Judges": "न्यायियों", "Ruth": "रूत", "1 Samuel": "1 शमूएल", "2 Samuel": "2 शमूएल",
    "1 Kings": "1 राजाओं", "2 Kings": "2 राजाओं", "1 Chronicles": "1 इतिहास", "2 Chronicles": "2 इतिहास",
    "Ezra": "एज्रा", "Nehemiah": "नहेम्याह", "Esther": "एस्तेर", "Job": "अय्यूब", "Psalms": "भजन संहिता",
    "Proverbs": "नीतिवचन", "Ecclesiastes": "सभोपदेशक", "Song of Solomon": "श्रेष्ठगीत", "Isaiah": "यशायाह",
    "Jeremiah": "यिर्मयाह", "Lamentations": "विलापगीत", "Ezekiel": "यहेजकेल", "Daniel": "दानिय्येल",
    "Hosea": "होशे", "Joel": "योएल", "Amos": "आमोस", "Obadiah": "ओबद्याह", "Jonah": "योना",
    "Micah": "मीका", "Nahum": "नहूम", "Habakkuk": "हबक्कूक", "Zephaniah": "सपन्याह", "Haggai": "हाग्गै",
    "Zechariah": "जकर्याह", "Malachi": "मलाकी",
    "Matthew": "मत्ती", "Mark": "मरकुस", "Luke": "लूका", "John": "यूहन्ना", "Acts": "प्रेरितों के काम",
    "Romans": "रोमियों", "1 Corinthians": "1 कुरिन्थियों", "2 Corinthians": "2 कुरिन्थियों", "Galatians": "गलातियों",
    "Ephesians": "इफिसियों", "Philippians": "फिलिप्पियों", "Colossians": "कुलुस्सियों", "1 Thessalonians": "1 थिस्सलुनीकियों",
    "2 Thessalonians": "2 थिस्सलुनीकियों", "1 Timothy": "1 तीमुथियुस", "2 Timothy": "2 तीमुथियुस", "Titus": "तीतुस",
    "Philemon": "फिलेमोन", "Hebrews": "इब्रानियों", "James": "याकूब", "1 Peter": "1 पतरस", "2 Peter": "2 पतरस",
    "1 John": "1 यूहन्ना", "2 John": "2 यूहन्ना", "3 John": "3 यूहन्ना", "Jude": "यहूदा", "Revelation": "प्रकाशितवाक्य",
}

MALAYALAM_BOOK_NAMES: dict[str, str] = {
    "Genesis": "ഉല്പത്തി", "Exodus": "പുറപ്പാട്", "Leviticus": "ലേവ്യപുസ്തകം", "Numbers": "സംഖ്യാപുസ്തകം", "Deuteronomy": "ആവർത്തനം",
    "Joshua": "യോശുവ", "Judges": "ന്യായാധിപന്മാർ", "Ruth": "രൂത്ത്", "1 Samuel": "1 ശമൂവേൽ", "2 Samuel": "2 ശമൂവേൽ",
    "1 Kings": "1 രാജാക്കന്മാർ", "2 Kings": "2 രാജാക്കന്മാർ", "1 Chronicles": "1 ദിനവൃത്താന്തം", "2 Chronicles": "2 ദിനവൃത്താന്തം",
    "Ezra": "എസ്രാ", "Nehemiah": "നെഹെമ്യാവ്", "Esther": "എസ്ഥേർ", "Job": "ഇയ്യോബ്", "Psalms": "സങ്കീർത്തനങ്ങൾ",
    "Proverbs": "സദൃശവാക്യങ്ങൾ", "Ecclesiastes": "സഭാപ്രസംഗി", "Song of Solomon": "ഉത്തമഗീതം", "Isaiah": "യശായാ",
    "Jeremiah": "യിരെമ്യാവ്", "Lamentations": "വിലാപങ്ങൾ", "Ezekiel": "യെഹെസ്കേൽ", "Daniel": "ദാനീയേൽ",
    "Hosea": "ഹോശേയ", "Joel": "യോവേൽ", "Amos": "ആമോസ്", "Obadiah": "ഓബദ്യാവ്", "Jonah": "യോനാ",
    "Micah": "മീഖാ", "Nahum": "നഹൂം", "Habakkuk": "ഹബക്കൂക്ക്", "Zephaniah": "സെഫന്യാവ്", "Haggai": "ഹഗ്ഗായി",
    "Zechariah": "സെഖര്യാവ്", "Malachi": "മലാഖി",
    "Matthew": "മത്തായി", "Mark": "മർക്കൊസ്", "Luke": "ലൂക്കൊസ്", "John": "യോഹന്നാൻ", "Acts": "അപ്പൊസ്തലപ്രവൃത്തികൾ",
    "Romans": "റോമാക്കാർ", "1 Corinthians": "1 കൊരിന്ത്യർ", "2 Corinthians": "2 കൊരിന്ത്യർ", "Galatians": "ഗലാത്യർ",
    "Ephesians": "എഫെസ്യർ", "Philippians": "ഫിലിപ്പിയർ", "Colossians": "കൊലൊസ്സ്യർ", "1 Thessalonians": "1 തെസ്സലൊനീക്യർ",
    "2 Thessalonians": "2 തെസ്സലൊനീക്യർ", "1 Timothy": "1 തിമൊഥെയൊസ്", "2 Timothy": "2 തിമൊഥെയൊസ്", "Titus": "തീത്തൊസ്",
    "Philemon": "ഫിലേമോൻ", "Hebrews": "എബ്രായർ", "James": "യാക്കോബ്", "1 Peter": "1 പത്രൊസ്", "2 Peter": "2 പത്രൊസ്",
    "1 John": "1 യോഹന്നാൻ", "2 John": "2 യോഹന്നാൻ", "3 John": "3 യോഹന്നാൻ", "Jude": "യൂദാ", "Revelation": "വെളിപ്പാട്",
}

DISPLAY_NAMES: dict[str, dict[str, str]] = {
    "hi-IN": HINDI_BOOK_NAMES,
    "ml-IN": MALAYALAM_BOOK_NAMES,
}

# Variant spellings (from the model or typed by users) that resolve to an
# English canonical book. Canonical names of every locale and all localized
# aliases are resolved through the registry; only extras live here.
LOCALIZED_VARIANTS_TO_ENGLISH: dict[str, str] = {
    "റോമര്‍": "Romans",
    "സങ്കീര്‍ത്തനം": "Psalms",
    "ലൂക്കാ": "Luke",
    "ജോൺ": "John",
    "भजन-संहिता": "Psalms",
}
