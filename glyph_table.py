"""
Glyph tables for the Preeti and Hisab legacy Nepali fonts
Each legacy keystroke (or short keystroke sequence) maps to the role the glyph
plays inside a syllable and the Unicode Devanagari it stands for.
"""

from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, NamedTuple, Tuple

from font_swap import preeti_to_hisab


class GlyphRole(Enum):
    """What a legacy glyph does inside an orthographic syllable"""
    CONSONANT = 'consonant'
    INDEPENDENT_VOWEL = 'independent_vowel'
    DEPENDENT_VOWEL_SIGN_PRE = 'dependent_vowel_sign_pre'
    DEPENDENT_VOWEL_SIGN_POST = 'dependent_vowel_sign_post'
    HALF_FORM_JOINER = 'half_form_joiner'
    CONJUNCT_TRIGGER = 'conjunct_trigger'
    VOWEL_MODIFIER = 'vowel_modifier'
    REPH = 'reph'
    NUMERAL = 'numeral'
    PUNCTUATION = 'punctuation'
    WHITESPACE = 'whitespace'
    UNRECOGNIZED = 'unrecognized'


class Glyph(NamedTuple):
    """One legacy keystroke sequence and what it means"""
    legacy: str
    role: GlyphRole
    fragment: str


# Full consonants, including the precomposed conjuncts Preeti draws with one key
PREETI_CONSONANTS = {
    'a': 'ब', 'b': 'द', 'd': 'म', 'e': 'भ', 'g': 'न', 'h': 'ज',
    'j': 'व', 'k': 'प', 'n': 'ल', 'o': 'य', 'r': 'च', 's': 'क',
    't': 'त', 'u': 'ग', 'v': 'ख', 'w': 'ध', 'x': 'ह', 'y': 'थ',
    'z': 'श', ';': 'स', '/': 'र', '`': 'ञ', 'ª': 'ङ',
    # Number row
    '1': 'ज्ञ', '2': 'द्द', '3': 'घ', '4': 'द्ध', '5': 'छ',
    '6': 'ट', '7': 'ठ', '8': 'ड', '9': 'ढ',
    # Single-key conjuncts
    'q': 'त्र', 'B': 'द्य', 'Q': 'त्त', '>': 'श्र',
    '§': 'ट्ट', '¶': 'ठ्ठ', 'Ë': 'ङ्ग', 'Í': 'ङ्क', 'Ì': 'न्न', '°': 'ङ्ढ',
    'å': 'द्व',
    # Ra with its vowel sign drawn as one glyph
    '?': 'रु', '¿': 'रू', 'Å': 'हृ',
    # Hook consonants (base glyph plus the m hook)
    'km': 'फ', 'em': 'झ',
}

# Half forms: the consonant with its inherent vowel killed, joining the next one
PREETI_HALF_FORMS = {
    'A': 'ब्', 'D': 'म्', 'E': 'भ्', 'G': 'न्', 'H': 'ज्', 'I': 'क्ष्',
    'J': 'व्', 'K': 'प्', 'N': 'ल्', 'R': 'च्', 'S': 'क्', 'T': 'त्',
    'U': 'ग्', 'V': 'ख्', 'W': 'ध्', 'X': 'ह्', 'Y': 'थ्', 'Z': 'श्',
    'i': 'ष्', ':': 'स्', '~': 'ञ्', '0': 'ण्', '»': 'न्न्', '¡': 'ज्ञ्',
    'Km': 'फ्', 'Em': 'झ्',
}

PREETI_INDEPENDENT_VOWELS = {
    'c': 'अ', 'cf': 'आ', 'O': 'इ', 'O{': 'ई', 'p': 'उ',
    'pm': 'ऊ', 'C': 'ऋ', 'P': 'ए', 'P]': 'ऐ', 'cf]': 'ओ', 'cf}': 'औ',
}

# Typed before the consonant, read after it
PREETI_PRE_SIGNS = {
    'l': 'ि',
}

PREETI_POST_SIGNS = {
    'f': 'ा', 'L': 'ी', "'": 'ु', '"': 'ू', '[': 'ृ', ']': 'े', '}': 'ै',
    'f]': 'ो', 'f}': 'ौ',
}

PREETI_VOWEL_MODIFIERS = {
    '+': 'ं', 'F': 'ँ', 'M': 'ः',
}

# Virama and the subjoined forms that hang off the consonant typed before them
PREETI_JOINERS = {
    '\\': '्', '|': '्र', '«': '्र', 'Ø': '्य',
}

# Ra on top of a syllable, typed after everything it sits on
PREETI_REPH = {
    '{': 'र्',
}

PREETI_NUMERALS = {
    ')': '०', '!': '१', '@': '२', '#': '३', '$': '४',
    '%': '५', '^': '६', '&': '७', '*': '८', '(': '९',
}

PREETI_PUNCTUATION = {
    '.': '।', ',': ',', '-': '(', '_': ')', '=': '.', '<': '?',
    'Ö': '=', 'Ù': ';', 'Ú': '’', '˜': 'ऽ', 'ç': 'ॐ',
}

VIRAMA = '्'
AA_SIGN_KEY = 'f'


def _build_entries(groups: Iterable[Tuple[GlyphRole, Dict[str, str]]]) -> Dict[str, Tuple[GlyphRole, str]]:
    """Flatten role-grouped key tables into one key -> (role, fragment) dict"""
    entries = {}
    for role, table in groups:
        for key, fragment in table.items():
            if key in entries:
                raise ValueError(f"Legacy key {key!r} mapped twice")
            entries[key] = (role, fragment)
    return entries


def _full_forms_from_half_forms(half_forms: Dict[str, str]) -> Dict[str, str]:
    """
    Half form + aa stroke draws the full consonant (e.g. 'if' is ष)

    Preeti has no separate key for consonants whose full form is the half
    form plus a vertical bar, so the bar key completes them.
    """
    return {
        key + AA_SIGN_KEY: fragment[:-len(VIRAMA)]
        for key, fragment in half_forms.items()
        if fragment.endswith(VIRAMA)
    }


PREETI_ENTRIES = _build_entries((
    (GlyphRole.CONSONANT, PREETI_CONSONANTS),
    (GlyphRole.CONSONANT, _full_forms_from_half_forms(PREETI_HALF_FORMS)),
    (GlyphRole.CONJUNCT_TRIGGER, PREETI_HALF_FORMS),
    (GlyphRole.INDEPENDENT_VOWEL, PREETI_INDEPENDENT_VOWELS),
    (GlyphRole.DEPENDENT_VOWEL_SIGN_PRE, PREETI_PRE_SIGNS),
    (GlyphRole.DEPENDENT_VOWEL_SIGN_POST, PREETI_POST_SIGNS),
    (GlyphRole.VOWEL_MODIFIER, PREETI_VOWEL_MODIFIERS),
    (GlyphRole.HALF_FORM_JOINER, PREETI_JOINERS),
    (GlyphRole.REPH, PREETI_REPH),
    (GlyphRole.NUMERAL, PREETI_NUMERALS),
    (GlyphRole.PUNCTUATION, PREETI_PUNCTUATION),
))

# Hisab draws the same glyphs, only the number row keys are swapped
HISAB_ENTRIES = {preeti_to_hisab(key): entry for key, entry in PREETI_ENTRIES.items()}


class GlyphTable:
    """Read-only keystroke -> glyph lookup for one legacy font"""

    def __init__(self, name: str, entries: Mapping[str, Tuple[GlyphRole, str]]):
        self.name = name
        self._entries = MappingProxyType(dict(entries))
        self.max_key_length = max(len(key) for key in self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def keys(self):
        return self._entries.keys()

    def lookup(self, key: str) -> Glyph:
        """
        Look up one legacy key or key sequence

        Args:
            key: Legacy keystroke(s)

        Returns:
            The glyph; keys outside the table come back as whitespace or
            unrecognized glyphs whose fragment is the key itself
        """
        entry = self._entries.get(key)
        if entry is None:
            role = GlyphRole.WHITESPACE if key.isspace() else GlyphRole.UNRECOGNIZED
            return Glyph(key, role, key)
        role, fragment = entry
        return Glyph(key, role, fragment)

    def match(self, text: str, pos: int) -> Glyph:
        """Longest table entry starting at text[pos], or the single character there"""
        longest = min(self.max_key_length, len(text) - pos)
        for length in range(longest, 1, -1):
            key = text[pos:pos + length]
            if key in self._entries:
                return self.lookup(key)
        return self.lookup(text[pos])

    def scan(self, text: str) -> List[Glyph]:
        """Split text into glyphs, left to right"""
        glyphs = []
        pos = 0
        while pos < len(text):
            glyph = self.match(text, pos)
            glyphs.append(glyph)
            pos += len(glyph.legacy)
        return glyphs


PREETI_TABLE = GlyphTable('preeti', PREETI_ENTRIES)
HISAB_TABLE = GlyphTable('hisab', HISAB_ENTRIES)
