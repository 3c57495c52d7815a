"""
Shared schema configuration
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case names also accepted on input"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
