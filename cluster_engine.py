"""
Syllable cluster engine
Groups legacy glyphs into orthographic syllables, moves every glyph of a
syllable from typing order into Unicode logical order, and joins the result.
"""

from typing import Iterable, List, NamedTuple, Optional, Tuple, Union

from glyph_table import Glyph, GlyphRole

# Roles that make up the consonant stack of a syllable, kept in typed order
STACK_ROLES = (
    GlyphRole.CONSONANT,
    GlyphRole.INDEPENDENT_VOWEL,
    GlyphRole.CONJUNCT_TRIGGER,
    GlyphRole.HALF_FORM_JOINER,
)

# Roles that attach to whatever syllable is already open
TRAILING_ROLES = (
    GlyphRole.DEPENDENT_VOWEL_SIGN_POST,
    GlyphRole.VOWEL_MODIFIER,
    GlyphRole.REPH,
)

VIRAMA = '्'

# Two vowel signs that together draw one (the bar of ा plus the stroke of े)
VOWEL_SIGN_COMPOSITIONS = {
    ('ा', 'े'): 'ो',
    ('ा', 'ै'): 'ौ',
    ('े', 'ा'): 'ो',
    ('ै', 'ा'): 'ौ',
}

# Independent vowel completed by a vowel sign typed after it
INDEPENDENT_VOWEL_COMPOSITIONS = {
    ('अ', 'ा'): 'आ',
    ('अ', 'ो'): 'ओ',
    ('अ', 'ौ'): 'औ',
    ('आ', 'े'): 'ओ',
    ('आ', 'ै'): 'औ',
    ('ए', 'े'): 'ऐ',
}


class SyllableCluster(NamedTuple):
    """Glyphs of one syllable in the order they were typed"""
    glyphs: Tuple[Glyph, ...]


class ReorderedCluster(NamedTuple):
    """Glyphs of one syllable in Unicode order, plus glyphs it pushed out"""
    glyphs: Tuple[Glyph, ...]
    displaced: Tuple[Glyph, ...] = ()


Unit = Union[SyllableCluster, ReorderedCluster, Glyph]


def passthrough(glyph: Glyph) -> Glyph:
    """Degrade a glyph to its raw legacy text"""
    return Glyph(glyph.legacy, GlyphRole.UNRECOGNIZED, glyph.legacy)


def segment(glyphs: Iterable[Glyph]) -> List[Union[SyllableCluster, Glyph]]:
    """
    Group glyphs into syllable clusters

    A cluster opens on a consonant, half form or independent vowel. Pre-base
    vowel signs typed before it are carried into it; half forms and explicit
    viramas keep the cluster open for the next consonant; post-base signs,
    vowel modifiers and the reph attach to the open cluster. Everything else
    is emitted on its own, and modifiers with nothing to attach to degrade to
    their raw legacy text.

    Args:
        glyphs: Glyphs in typing order

    Returns:
        Clusters and standalone glyphs, in input order
    """
    units: List[Union[SyllableCluster, Glyph]] = []
    pending_pre: List[Glyph] = []
    current: Optional[List[Glyph]] = None
    awaiting_consonant = False

    def close_cluster():
        nonlocal current, awaiting_consonant
        if current:
            units.append(SyllableCluster(tuple(current)))
        current = None
        awaiting_consonant = False

    def drop_pending_pre():
        units.extend(passthrough(g) for g in pending_pre)
        pending_pre.clear()

    def open_cluster(glyph: Glyph):
        nonlocal current
        close_cluster()
        current = pending_pre + [glyph]
        pending_pre.clear()

    for glyph in glyphs:
        role = glyph.role

        if role is GlyphRole.CONSONANT:
            if current is not None and awaiting_consonant:
                current.append(glyph)
            else:
                open_cluster(glyph)
            awaiting_consonant = False

        elif role is GlyphRole.CONJUNCT_TRIGGER:
            if current is not None and awaiting_consonant:
                current.append(glyph)
            else:
                open_cluster(glyph)
            awaiting_consonant = True

        elif role is GlyphRole.INDEPENDENT_VOWEL:
            open_cluster(glyph)

        elif role is GlyphRole.DEPENDENT_VOWEL_SIGN_PRE:
            close_cluster()
            pending_pre.append(glyph)

        elif role is GlyphRole.HALF_FORM_JOINER:
            drop_pending_pre()
            if current is None:
                units.append(passthrough(glyph))
            else:
                current.append(glyph)
                awaiting_consonant = glyph.fragment == VIRAMA

        elif role in TRAILING_ROLES:
            drop_pending_pre()
            if current is None:
                units.append(passthrough(glyph))
            else:
                current.append(glyph)
                awaiting_consonant = False

        else:
            close_cluster()
            drop_pending_pre()
            units.append(glyph)

    close_cluster()
    drop_pending_pre()
    return units


def reorder(cluster: SyllableCluster) -> ReorderedCluster:
    """
    Put one cluster into Unicode logical order

    Emission order is reph, consonant stack as typed, pre-base sign,
    post-base sign, vowel modifiers. A cluster holds one pre-base sign, one
    post-base sign and one reph; a second one takes the slot and the earlier
    glyph is pushed out to follow the cluster as raw legacy text, unless the
    two post-base signs compose into a single vowel sign.
    """
    stack: List[Glyph] = []
    modifiers: List[Glyph] = []
    displaced: List[Glyph] = []
    pre_sign = post_sign = reph = None

    for glyph in cluster.glyphs:
        role = glyph.role
        if role in STACK_ROLES:
            # A half form already carries the virama the joiner would add
            if role is GlyphRole.HALF_FORM_JOINER and stack and stack[-1].fragment.endswith(VIRAMA):
                glyph = Glyph(glyph.legacy, role, glyph.fragment[len(VIRAMA):])
            stack.append(glyph)
        elif role is GlyphRole.DEPENDENT_VOWEL_SIGN_PRE:
            if pre_sign is not None:
                displaced.append(passthrough(pre_sign))
            pre_sign = glyph
        elif role is GlyphRole.DEPENDENT_VOWEL_SIGN_POST:
            if post_sign is None:
                post_sign = glyph
                continue
            composed = VOWEL_SIGN_COMPOSITIONS.get((post_sign.fragment, glyph.fragment))
            if composed:
                post_sign = Glyph(post_sign.legacy + glyph.legacy, role, composed)
            else:
                displaced.append(passthrough(post_sign))
                post_sign = glyph
        elif role is GlyphRole.VOWEL_MODIFIER:
            modifiers.append(glyph)
        elif role is GlyphRole.REPH:
            if reph is not None:
                displaced.append(passthrough(reph))
            reph = glyph
        else:
            displaced.append(passthrough(glyph))

    # अ + ा is आ, not two glyphs
    if post_sign is not None and len(stack) == 1 and stack[0].role is GlyphRole.INDEPENDENT_VOWEL:
        vowel = stack[0]
        composed = INDEPENDENT_VOWEL_COMPOSITIONS.get((vowel.fragment, post_sign.fragment))
        if composed:
            stack = [Glyph(vowel.legacy + post_sign.legacy, vowel.role, composed)]
            post_sign = None

    ordered = [reph] + stack + [pre_sign, post_sign] + modifiers
    return ReorderedCluster(
        tuple(g for g in ordered if g is not None),
        tuple(displaced),
    )


def emit(units: Iterable[Unit]) -> str:
    """Join the Unicode fragments of reordered clusters and standalone glyphs"""
    parts = []
    for unit in units:
        if isinstance(unit, SyllableCluster):
            unit = reorder(unit)
        if isinstance(unit, ReorderedCluster):
            parts.extend(g.fragment for g in unit.glyphs)
            parts.extend(g.fragment for g in unit.displaced)
        else:
            parts.append(unit.fragment)
    return ''.join(parts)
