from pydantic import BaseModel, Field


class RootResponse(BaseModel):
    message: str = Field()
    environment: str = Field()
    version: str = Field()
    timestamp: str = Field(description="ISO-8601 UTC time the request was handled")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "message": "Hello from CI/CD Pipeline! , Gitops",
                    "environment": "development",
                    "version": "1.0.0",
                    "timestamp": "2026-01-01T12:00:00.000Z",
                }
            ]
        }
    }


class VersionResponse(BaseModel):
    version: str = Field()
    environment: str = Field()

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"version": "1.0.0", "environment": "development"}
            ]
        }
    }
