"""
Autocomplete metadata models
"""

from typing import List
from pydantic import BaseModel, Field

class MetadataResponse(BaseModel):
    """Distinct topics and sections, each sorted"""
    topics: List[str] = Field(default_factory=list)
    sections: List[str] = Field(default_factory=list)
