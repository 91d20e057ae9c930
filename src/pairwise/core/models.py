"""Data models for records built by combiners."""

from pydantic import BaseModel, ConfigDict, Field

from pairwise.core.types import Age, Name


class Person(BaseModel):
    """Model representing a person assembled from a name and an age."""

    name: Name = Field(..., description="Display name of the person.")
    age: Age = Field(..., description="Age in years.")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"Person{{name='{self.name}', age={self.age}}}"
