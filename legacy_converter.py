"""
Preeti / Hisab to Unicode converter
"""

from cluster_engine import SyllableCluster, emit, reorder, segment
from glyph_table import HISAB_TABLE, PREETI_TABLE, GlyphTable


class LegacyFontConverter:
    """
    Converts text typed for one legacy font into Unicode Devanagari

    Conversion never fails: keys the font does not define, and signs with
    no syllable to attach to, come through as the original characters.
    """

    def __init__(self, table: GlyphTable):
        self.table = table

    @property
    def font(self) -> str:
        return self.table.name

    def convert(self, text: str) -> str:
        """
        Convert legacy keystrokes to Unicode

        Args:
            text: Text typed for this converter's font

        Returns:
            Unicode Devanagari text
        """
        if not text:
            return ''

        units = segment(self.table.scan(text))
        return emit(reorder(unit) if isinstance(unit, SyllableCluster) else unit for unit in units)


preeti_converter = LegacyFontConverter(PREETI_TABLE)
hisab_converter = LegacyFontConverter(HISAB_TABLE)


def preeti_to_unicode(text: str) -> str:
    return preeti_converter.convert(text)


def hisab_to_unicode(text: str) -> str:
    return hisab_converter.convert(text)
