"""Rendering of two pre-aligned sequences into colored, wrapped rows."""
from typing import Optional

from colors import DEFAULT_COLOR, color_of
from layout import partition
from schemas import AlignmentView, RenderedResidue, RenderedRow, RowChunk
from sequences import GAP

# Similar amino acid groups based on physicochemical properties (BLOSUM62-like)
SIMILAR_GROUPS = [
    set('GAVLI'),      # Small hydrophobic
    set('FYW'),        # Aromatic
    set('CM'),         # Sulfur-containing
    set('ST'),         # Hydroxyl
    set('KRH'),        # Positive charge
    set('DE'),         # Negative charge
    set('NQ'),         # Amide
    set('P'),          # Proline (unique)
]


def are_similar(a: str, b: str) -> bool:
    """Check if two amino acids are similar."""
    a, b = a.upper(), b.upper()
    if a == b:
        return True
    return any(a in group and b in group for group in SIMILAR_GROUPS)


def render_row(chunk: RowChunk) -> RenderedRow:
    """
    Color one row chunk.

    The top (reference) residue is always colored by its class. The bottom
    residue keeps its own class color only where it differs from the top;
    matching positions are left in the default color so mismatches stand out.
    """
    top = []
    bottom = []
    for column, (ref, other) in enumerate(zip(chunk.top, chunk.bottom)):
        position = chunk.offset + column
        mismatch = ref != other
        top.append(RenderedResidue(
            position=position,
            symbol=ref,
            color=color_of(ref),
            mismatch=mismatch,
        ))
        bottom.append(RenderedResidue(
            position=position,
            symbol=other,
            color=color_of(other) if mismatch else DEFAULT_COLOR,
            mismatch=mismatch,
        ))
    return RenderedRow(offset=chunk.offset, top=top, bottom=bottom)


def summarize(seq1: str, seq2: str) -> tuple[int, float, float]:
    """Mismatch count plus identity and similarity over gap-free columns."""
    mismatches = 0
    matches = 0
    similar = 0
    aligned_pairs = 0

    for r, q in zip(seq1, seq2):
        if r != q:
            mismatches += 1
        if r != GAP and q != GAP:
            aligned_pairs += 1
            if r == q:
                matches += 1
                similar += 1
            elif are_similar(r, q):
                similar += 1

    identity = (matches / aligned_pairs * 100) if aligned_pairs > 0 else 0
    similarity = (similar / aligned_pairs * 100) if aligned_pairs > 0 else 0
    return mismatches, round(identity, 1), round(similarity, 1)


def render_alignment(seq1: str, seq2: str, row_capacity: Optional[int]) -> AlignmentView:
    """
    Lay out and color an alignment for the given row capacity.

    Both sequences are upper-cased first, so matching and coloring are case
    insensitive. Nothing is rendered until a positive capacity is known.
    Unequal inputs are clipped to the shorter sequence.
    """
    upper_seq1 = seq1.upper()
    upper_seq2 = seq2.upper()
    length = min(len(upper_seq1), len(upper_seq2))
    mismatches, identity, similarity = summarize(upper_seq1, upper_seq2)

    rows = [render_row(chunk) for chunk in partition(upper_seq1, upper_seq2, row_capacity)]

    return AlignmentView(
        row_capacity=row_capacity if row_capacity and row_capacity > 0 else None,
        rows=rows,
        length=length,
        mismatches=mismatches,
        identity=identity,
        similarity=similarity,
    )
