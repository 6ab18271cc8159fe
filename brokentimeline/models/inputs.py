"""Input record for story composition"""

from typing import Any, Dict, List
from pydantic import BaseModel, ConfigDict, Field


class StoryInputs(BaseModel):
    """The eight nouns that feed every layer of the story.

    Instances are frozen: an edit produces a new record via ``with_field``.
    The original form's Portuguese keys are accepted as aliases.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, strict=True, extra="forbid")

    title: str = Field(default="Sinos de Pedra Fria", title="Título", description="Story title")
    protagonist: str = Field(
        default="Helena", alias="protagonista", title="Protagonista", description="Main character"
    )
    confidant: str = Field(
        default="Davi", alias="confidente", title="Confidente", description="The one the protagonist trusts"
    )
    ambiguous_figure: str = Field(
        default="Irmã Celina", alias="antagonista", title="Figura ambígua",
        description="Figure who may be guide or threat"
    )
    setting: str = Field(
        default="o mosteiro suspenso sobre a serra", alias="ambiente", title="Ambiente sagrado",
        description="Sacred place where the story happens"
    )
    chaos_trigger: str = Field(
        default="os sinos que tocam sozinhos", alias="gatilhoCaos", title="Gatilho do caos",
        description="Event that breaks the order"
    )
    spiritual_symbol: str = Field(
        default="véu azul", alias="simboloEspiritual", title="Símbolo espiritual",
        description="Object carrying the spiritual weight"
    )
    hidden_guilt: str = Field(
        default="abandonar Clara no portão", alias="culpaOculta", title="Culpa oculta",
        description="What the protagonist never confessed"
    )

    @classmethod
    def field_names(cls) -> List[str]:
        """Field names in form order"""
        return list(cls.model_fields.keys())

    @classmethod
    def field_label(cls, name: str) -> str:
        """Form label for a field"""
        if name not in cls.model_fields:
            raise ValueError(f"Unknown story field: {name}")
        return cls.model_fields[name].title or name

    def with_field(self, name: str, value: str) -> "StoryInputs":
        """Return a new record with one field replaced"""
        return self.with_fields({name: value})

    def with_fields(self, updates: Dict[str, Any]) -> "StoryInputs":
        """Return a new record with several fields replaced.

        Aliases are resolved to field names. Values go through validation,
        so a non-string raises ``pydantic.ValidationError``.
        """
        resolved = {_resolve_field_name(key): value for key, value in updates.items()}
        data = self.model_dump()
        data.update(resolved)
        return StoryInputs(**data)


def _resolve_field_name(key: str) -> str:
    if key in StoryInputs.model_fields:
        return key
    for name, info in StoryInputs.model_fields.items():
        if info.alias == key:
            return name
    raise ValueError(f"Unknown story field: {key}")
