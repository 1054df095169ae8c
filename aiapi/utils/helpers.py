import orjson
from typing import Any

from pydantic import BaseModel


def _orjson_default(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump()
    raise TypeError(f"Type is not JSON serializable: {type(obj).__name__}")


def orjson_dumps_bytes_wrapper(data: Any) -> bytes:
    """
    Encode a request payload to JSON bytes.

    Pydantic models (e.g. chat messages) are dumped to plain dicts. Raises
    orjson.JSONEncodeError for anything that cannot be encoded, including
    cyclic structures.
    """
    return orjson.dumps(
        data,
        default=_orjson_default,
        option=orjson.OPT_NON_STR_KEYS | orjson.OPT_PASSTHROUGH_DATETIME
    )
