"""
Model management service for copilot-api.

This module holds the catalogue of chat models offered to host plugins and
resolves the currently selected one.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from ..core import get_logger, get_settings, Settings
from ..models import ModelOption


DEFAULT_MODELS: List[ModelOption] = [
    ModelOption(label="GPT-4o", value="gpt-4o"),
    ModelOption(label="GPT-4.1", value="gpt-4.1"),
    ModelOption(label="o3-mini", value="o3-mini"),
    ModelOption(label="Claude 3.5 Sonnet", value="claude-3.5-sonnet"),
    ModelOption(label="Claude 3.7 Sonnet", value="claude-3.7-sonnet"),
    ModelOption(label="Gemini 2.0 Flash", value="gemini-2.0-flash-001"),
]


class ModelManager:
    """Catalogue of available models."""

    def __init__(
        self,
        models: Optional[List[ModelOption]] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.logger = get_logger(__name__)
        self._models: Dict[str, ModelOption] = {}

        for model in models or DEFAULT_MODELS:
            self._models[model.value] = model

    @property
    def default_model(self) -> ModelOption:
        return next(iter(self._models.values()))

    def list_models(self) -> List[ModelOption]:
        """Return the catalogue in display order."""
        return list(self._models.values())

    def get_model(self, value: str) -> Optional[ModelOption]:
        """Look up a model by the identifier sent to the API."""
        return self._models.get(value)

    def get_current_model(self) -> ModelOption:
        """
        Resolve the model selected in the chat settings.

        A selection missing from the catalogue is still honoured, using the
        identifier as its label. With nothing selected the first catalogue
        entry is used.

        Returns:
            The selected model option
        """
        selected = self.settings.chat.selected_model
        if not selected:
            return self.default_model

        model = self.get_model(selected)
        if model is None:
            self.logger.debug("Selected model not in catalogue", model=selected)
            return ModelOption(label=selected, value=selected)
        return model
