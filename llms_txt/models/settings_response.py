from pydantic import BaseModel

from llms_txt.models.configuration import Configuration


class SettingsResponse(BaseModel):
    options: Configuration
    llms_txt_url: str
    """Public URL of the generated file, shown to the admin for reference."""
