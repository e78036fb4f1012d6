"""Main entry point for the translator application."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from gemini_translator.coordinators import TranslationController
from gemini_translator.services import (
    CredentialStore,
    EnvFileCredentialStore,
    GeminiTranslationService,
    QSettingsCredentialStore,
    SettingsManager,
)
from gemini_translator.ui import ApiKeyDialog, MainWindow


def build_credential_store(settings: SettingsManager) -> CredentialStore:
    """Pick the API key storage backend configured in settings."""
    if settings.get_credential_backend() == "env":
        return EnvFileCredentialStore(settings.env_path)
    return QSettingsCredentialStore()


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    # 1. Configuration and logging
    settings = SettingsManager()
    logging.basicConfig(
        level=settings.get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # 2. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("Gemini Translator")
    app.setOrganizationName("GeminiTranslator")

    # 3. Initialize Infrastructure
    credential_store = build_credential_store(settings)
    translation_service = GeminiTranslationService(model_name=settings.get_model_name())

    # 4. Instantiate Controller (Dependency Injection)
    controller = TranslationController(
        translation_service=translation_service,
        credential_store=credential_store,
    )

    # 5. Construct UI and wire it to the controller
    main_window = MainWindow()
    main_window.set_controller(controller)
    main_window.show()

    api_key_dialog = ApiKeyDialog(main_window)
    api_key_dialog.set_controller(controller)

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
