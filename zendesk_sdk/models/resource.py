"""Resource descriptor model."""

from pydantic import BaseModel, Field


class ResourceDescriptor(BaseModel):
    """Names and URL scope of one resource type.

    Required fields:
        singular: Envelope key for one record (e.g. 'ticket')
        plural: Path segment and envelope key for collections (e.g. 'tickets')

    Optional fields:
        prefix: Parent scope, e.g. '/tickets/7' (default: top level)
        list_key: Envelope key of list responses when it is not `plural`
    """

    singular: str = Field(min_length=1)
    plural: str = Field(min_length=1)
    prefix: str = ""
    list_key: str | None = None

    model_config = {"frozen": True}

    @property
    def collection_key(self) -> str:
        return self.list_key or self.plural

    def scoped(self, prefix: str) -> "ResourceDescriptor":
        """Return the same resource bound under another prefix."""
        return self.model_copy(update={"prefix": prefix})

    def collection_path(self) -> str:
        return f"{self.prefix}/{self.plural}.json"

    def member_path(self, resource_id: int | str) -> str:
        return f"{self.prefix}/{self.plural}/{resource_id}.json"

    def show_many_path(self) -> str:
        return f"{self.prefix}/{self.plural}/show_many.json"
