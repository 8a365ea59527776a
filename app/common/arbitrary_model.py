from pydantic import BaseModel, ConfigDict


class ArbitraryModel(BaseModel):
    """Базовая модель схем приложения"""

    model_config = ConfigDict(arbitrary_types_allowed=True)
