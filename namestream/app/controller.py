# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import Optional

from namestream.agents.name_converter import NameConverter
from namestream.config.settings import AppConfig
from namestream.orchestration.llm_client import LLMClient
from namestream.orchestration.name_result import NameResult
from namestream.orchestration.prompt_builder import PromptBuilder
from namestream.preprocessing.culture_catalog import CultureCatalog
from namestream.utils.logging import SimpleLogger


class AppController:
    def __init__(
        self,
        config: Optional[AppConfig] = None,
        catalog: Optional[CultureCatalog] = None,
        llm_client: Optional[LLMClient] = None,
    ) -> None:
        """
        Central app controller, built once per process.

        - Resolves AppConfig from the environment unless one is given, then
          applies its log level (a level set only in .env is known from here on).
        - Loads the CultureCatalog once.
        - Creates a shared LLMClient + PromptBuilder + NameConverter.
        """
        self.config = config or AppConfig.from_env()
        SimpleLogger.set_level(self.config.log_level)
        self.catalog = catalog or CultureCatalog()
        self.llm_client = llm_client or LLMClient(self.config)
        self.prompt_builder = PromptBuilder(self.catalog)
        self.name_converter = NameConverter(
            prompt_builder=self.prompt_builder,
            llm_client=self.llm_client,
        )

    def convert_name(self, name: str, culture: str) -> NameResult:
        return self.name_converter.run(name, culture)
