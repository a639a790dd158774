"""Dependency Injection Container."""

from injector import Injector, Module, provider, singleton

from .config import Settings, get_settings
from ..oracle import OllamaClient, OllamaConfig
from ..agents import Explainer, PlanSynthesizer, UIAgent


class CoreModule(Module):
    """Core dependencies."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    @singleton
    @provider
    def provide_settings(self) -> Settings:
        return self.settings

    @singleton
    @provider
    def provide_oracle(self, settings: Settings) -> OllamaClient:
        """Provide the Ollama chat client shared by planner and explainer."""
        return OllamaClient(OllamaConfig.from_settings(settings))

    @singleton
    @provider
    def provide_planner(self, oracle: OllamaClient, settings: Settings) -> PlanSynthesizer:
        return PlanSynthesizer(oracle, repair_json=settings.planner_repair_json)

    @singleton
    @provider
    def provide_explainer(self, oracle: OllamaClient) -> Explainer:
        return Explainer(oracle)

    @singleton
    @provider
    def provide_agent(
        self, planner: PlanSynthesizer, explainer: Explainer, settings: Settings
    ) -> UIAgent:
        """Provide the UI agent with all dependencies."""
        return UIAgent(planner, explainer, max_message_length=settings.max_message_length)


def create_container(settings: Settings | None = None) -> Injector:
    """Create configured injector."""
    return Injector([CoreModule(settings)])
