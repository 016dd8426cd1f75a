"""Sequence input cleanup and validation."""
import re

from Bio.Data.IUPACData import protein_letters

GAP = "-"
ALLOWED_RESIDUES = protein_letters + GAP

SEQUENCE_PATTERN = re.compile(f"[{re.escape(ALLOWED_RESIDUES)}]+", re.IGNORECASE)


def clean_sequence(raw: str) -> str:
    """Remove all whitespace, as typed or pasted input may contain it."""
    return "".join(raw.split())


def validate_sequence(sequence: str) -> str:
    """Check that a sequence only holds amino acid letters and gaps."""
    if not sequence:
        raise ValueError("Sequence must contain at least one residue")
    if not SEQUENCE_PATTERN.fullmatch(sequence):
        bad = sorted({c for c in sequence.upper() if c not in ALLOWED_RESIDUES})
        raise ValueError(
            f"Only amino acid letters ({', '.join(protein_letters)}) and '{GAP}' "
            f"are allowed; found {', '.join(repr(c) for c in bad)}"
        )
    return sequence


def validate_pair(seq1: str, seq2: str) -> None:
    """Aligned sequences must have the same length."""
    if len(seq1) != len(seq2):
        raise ValueError(
            f"Sequence lengths must match: {len(seq1)} != {len(seq2)}"
        )
