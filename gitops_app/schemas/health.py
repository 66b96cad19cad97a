from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = Field()
    environment: str = Field()
    uptime: float = Field(ge=0)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"status": "healthy", "environment": "development", "uptime": 12.34}
            ]
        }
    }
