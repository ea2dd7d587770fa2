from lyocalc.storage.config_store import ANONYMOUS_OWNER, ConfigurationStore
from lyocalc.storage.step_io import StepImportError, export_steps, import_steps

__all__ = ["ANONYMOUS_OWNER", "ConfigurationStore", "StepImportError", "export_steps", "import_steps"]
