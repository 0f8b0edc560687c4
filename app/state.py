from app.services.rules.template_extractor import TemplateRuleExtractor


class AppState:
    template_extractor: TemplateRuleExtractor | None = None


global_state = AppState()
