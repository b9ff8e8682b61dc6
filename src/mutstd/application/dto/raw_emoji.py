"""
Schema of a raw catalog entry as published in the Mutant Standard JSON.
"""

from typing import Annotated, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

Codepoint = Annotated[StrictInt, Field(ge=0)]


class RawEmojiEntry(BaseModel):
    """
    One entry of the catalog document.

    `code` is either the codepoint list or a string sentinel (the dataset
    uses "!") for entries without assigned codepoints. Modifier fields hold
    the dataset codes and are resolved by the decoder.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    short: StrictStr
    root: StrictStr
    desc: StrictStr
    cat: StrictStr
    code: Union[List[Codepoint], StrictStr]
    color: Optional[StrictStr] = None
    morph: Optional[StrictStr] = None

    def codepoints(self) -> tuple[int, ...]:
        """Get codepoints, empty when `code` is a sentinel string."""
        if isinstance(self.code, str):
            return ()
        return tuple(self.code)


# Expected shape per field, used in type mismatch errors.
EXPECTED_TYPES: Dict[str, str] = {
    "short": "string",
    "root": "string",
    "desc": "string",
    "cat": "string",
    "code": "array of non-negative integers or string",
    "color": "string",
    "morph": "string",
}
