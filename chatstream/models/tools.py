from typing import Any, Optional

from pydantic import BaseModel


class ToolCall(BaseModel):
    """A completed tool invocation requested by the model."""
    call_id: str
    fn_name: str
    fn_arguments: Optional[Any] = None
    """Arguments parsed from the assembled JSON text, None if unparsable."""
