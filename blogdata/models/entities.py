"""Blog entities - the documents stored on disk, one JSON file per record."""

from dataclasses import dataclass
from datetime import datetime
from typing import Generic, Optional, List, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal


class Entity(BaseModel):
    """Base for stored records.

    Fields serialize with PascalCase names ("Id", "Name", ...) so the files
    keep the field names existing blog data directories already use.
    """
    id: str = ""

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        validate_assignment=True,
    )

    def to_json(self) -> str:
        """Canonical file contents for this entity."""
        return self.model_dump_json(by_alias=True, indent=2)


class Category(Entity):
    """Post category."""
    name: str = ""


class Tag(Entity):
    """Post tag."""
    name: str = ""


class BlogPost(Entity):
    """Blog post with its embedded category and tags."""
    title: str = ""
    text: str = ""
    publish_date: datetime = Field(default_factory=datetime.now)
    category: Optional[Category] = None
    tags: List[Tag] = Field(default_factory=list)


E = TypeVar('E', bound=Entity)


@dataclass(frozen=True)
class EntityDescriptor(Generic[E]):
    """What a repository needs to know about one entity type."""
    name: str
    model: Type[E]
    folder: str

    def parse(self, text: str) -> E:
        """Deserialize file contents. Raises pydantic.ValidationError on bad input."""
        return self.model.model_validate_json(text)

    def file_name(self, entity_id: str) -> str:
        return f"{entity_id}.json"
