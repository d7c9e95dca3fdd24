"""
Data models for redirect rules.
"""
from typing import List

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class RedirectRule(BaseModel):
    """A single path-to-URL routing instruction."""

    path: StrictStr = Field(..., description="Request path, compared exactly")
    url: StrictStr = Field(..., description="Redirect destination, passed through verbatim")

    model_config = ConfigDict(extra="forbid", frozen=True)


# Ordered; the first rule for a given path wins.
RuleSet = List[RedirectRule]
