# app/schemas/base_schema.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

class CamelModel(BaseModel):
    """
    所有 API Schema 的基底：
    - JSON 欄位使用 camelCase (fullName, skillsRequired ...)，Python 端維持 snake_case
    - 兩種寫法的輸入都接受
    - 可直接從 ORM 物件建立
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
