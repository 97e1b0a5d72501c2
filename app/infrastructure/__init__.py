"""Infrastructure modules for the translation resolver.

Components:
- configuration: Settings management (settings, I18nSettings)
- logging: Structured logging and operation scopes (get_module_logger, bind_scope)
- operations: Operation results and error classification
- i18n: Resource store, placeholder expansion, argument formatting, loaders
"""
