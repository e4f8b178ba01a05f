"""
Preeti <-> Hisab keystroke converter
Hisab is Preeti with the number row swapped: the plain digit keys and the
shifted digit keys trade places. Every other key means the same in both fonts.
"""

# Preeti keystroke -> Hisab keystroke
PREETI_TO_HISAB = {
    # Shifted row
    '!': '1', '@': '2', '#': '3', '$': '4', '%': '5',
    '^': '6', '&': '7', '*': '8', '(': '9', ')': '0',
    # Digit row
    '1': '!', '2': '@', '3': '#', '4': '$', '5': '%',
    '6': '^', '7': '&', '8': '*', '9': '(', '0': ')',
}

# Hisab keystroke -> Preeti keystroke (exact inverse of the table above)
HISAB_TO_PREETI = {hisab: preeti for preeti, hisab in PREETI_TO_HISAB.items()}

_PREETI_TO_HISAB_TABLE = str.maketrans(PREETI_TO_HISAB)
_HISAB_TO_PREETI_TABLE = str.maketrans(HISAB_TO_PREETI)


def preeti_to_hisab(text: str) -> str:
    """
    Convert Preeti keystrokes to the Hisab keystrokes that draw the same glyphs

    Args:
        text: Text typed for the Preeti font

    Returns:
        The same text typed for the Hisab font
    """
    return text.translate(_PREETI_TO_HISAB_TABLE)


def hisab_to_preeti(text: str) -> str:
    """Convert Hisab keystrokes to Preeti keystrokes"""
    return text.translate(_HISAB_TO_PREETI_TABLE)
