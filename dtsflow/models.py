from typing import Optional
from pydantic import BaseModel


class Member(BaseModel):
    """One structural shape contributed by a declaration occurrence.

    Two members are the same shape when their fields are equal, so the same
    signature parsed from two different files compares equal.
    """
    # "property_signature", "method_signature", "call_signature", "type_alias", ...
    kind: str
    name: Optional[str] = None
    # Whitespace-normalized source text of the shape, without bodies
    signature: str

    model_config = {
        "frozen": True
    }
