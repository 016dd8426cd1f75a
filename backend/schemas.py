"""Data models for the alignment visualizer."""
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from sequences import clean_sequence, validate_pair, validate_sequence


class RowChunk(BaseModel):
    model_config = ConfigDict(frozen=True)

    offset: int  # index of the first column in the full sequences
    top: str
    bottom: str


class RenderedResidue(BaseModel):
    model_config = ConfigDict(frozen=True)

    position: int
    symbol: str
    color: str
    mismatch: bool = False


class RenderedRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    offset: int
    top: list[RenderedResidue]
    bottom: list[RenderedResidue]


class AlignmentView(BaseModel):
    model_config = ConfigDict(frozen=True)

    row_capacity: Optional[int] = None  # None until the surface is measured
    rows: list[RenderedRow] = []
    length: int = 0
    mismatches: int = 0
    identity: float = 0.0
    similarity: float = 0.0


class AlignmentRequest(BaseModel):
    seq1: str
    seq2: str

    @field_validator("seq1", "seq2", mode="before")
    @classmethod
    def _strip_whitespace(cls, value):
        return clean_sequence(value) if isinstance(value, str) else value

    @field_validator("seq1", "seq2")
    @classmethod
    def _allowed_residues(cls, value: str) -> str:
        return validate_sequence(value)

    @model_validator(mode="after")
    def _equal_length(self):
        validate_pair(self.seq1, self.seq2)
        return self


class RenderRequest(AlignmentRequest):
    width: Optional[float] = None  # container width; omitted before layout


class ColorTable(BaseModel):
    colors: dict[str, str]  # residue -> hex color
    classes: dict[str, str]  # residue -> chemical class
    default: str


# --- Live session messages ---

class SequencesMessage(AlignmentRequest):
    type: Literal["sequences"]


class ResizeMessage(BaseModel):
    type: Literal["resize"]
    width: float


class SelectionMessage(BaseModel):
    type: Literal["selection"]
    text: str = ""


class ClipboardResultMessage(BaseModel):
    type: Literal["clipboard_result"]
    id: int
    ok: bool
    error: Optional[str] = None


ClientMessage = Annotated[
    Union[SequencesMessage, ResizeMessage, SelectionMessage, ClipboardResultMessage],
    Field(discriminator="type"),
]


class ViewMessage(AlignmentView):
    type: Literal["view"] = "view"


class ClipboardWriteMessage(BaseModel):
    type: Literal["clipboard_write"] = "clipboard_write"
    id: int
    text: str


class CopiedMessage(BaseModel):
    type: Literal["copied"] = "copied"
    text: str


class ErrorMessage(BaseModel):
    type: Literal["error"] = "error"
    detail: str
