"""Natural language description to schema table"""

from core.enums import PromptStyle
from core.exceptions import ValidationError
from core.interfaces import ModelGateway
from core.models import Table
from core.schema import unparse_schema
from llm.prompts import SchemaGenerationPrompt
from utils.log import create_logger

logger = create_logger(__name__)


class Schemifier:
    """Asks the model for schema items and lays them out as [keys, descriptions, types]"""

    def __init__(self, gateway: ModelGateway, style: PromptStyle = PromptStyle.CONSTRAINED):
        self.gateway = gateway
        self.style = style
        self.prompt_builder = SchemaGenerationPrompt()

    def run(self, description: str) -> Table:
        if not description or not str(description).strip():
            raise ValidationError("Invalid description: The schema description must not be empty.")

        constrained = self.style == PromptStyle.CONSTRAINED
        context = {"constrained": constrained}
        raw = self.gateway.invoke(
            self.prompt_builder.build_prompt(context),
            str(description),
            self.prompt_builder.response_format(context) if constrained else None
        )
        schema = self.prompt_builder.parse_response(raw)

        logger.info(f"Generated schema with {len(schema)} fields")
        return unparse_schema(schema)
