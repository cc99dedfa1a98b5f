from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict

_EXTRA_MODES = ("allow", "forbid", "ignore")
_STRICT_WORDS = ("1", "true", "yes", "on", "strict")
_LENIENT_WORDS = ("0", "false", "no", "off", "lenient")


def _env_extra_mode(default: str = "ignore") -> str:
    """
    How loaded documents treat keys the models do not declare.

    Read from MOBILEDOC_EXTRA (allow|forbid|ignore). "strict"/true-ish values
    mean forbid, "lenient"/false-ish values mean allow; anything else falls
    back to ``default``.
    """
    value = (os.getenv("MOBILEDOC_EXTRA") or default).strip().lower()
    if value in _EXTRA_MODES:
        return value
    if value in _STRICT_WORDS:
        return "forbid"
    if value in _LENIENT_WORDS:
        return "allow"
    return default


class MDModel(BaseModel):
    """
    Base for document models.

    Instances are frozen: a loaded document is read-only to the renderer. The
    unknown-key policy is fixed at import time from MOBILEDOC_EXTRA.
    """

    model_config = ConfigDict(extra=_env_extra_mode(), frozen=True)


__all__ = ["MDModel", "_env_extra_mode"]
