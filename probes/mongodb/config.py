from pydantic import BaseModel, ConfigDict, Field


class MongoDBProbeConfig(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    server: str = Field(default="", alias="target")
    port: int = 27017
    username: str = ""
    password: str = ""
    auth_source: str = "admin"
    database: str = ""
    collection: str = ""
    query: str = ""

    @property
    def has_query(self) -> bool:
        return bool(self.collection) and bool(self.query)
