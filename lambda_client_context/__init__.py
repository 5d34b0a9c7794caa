from lambda_client_context.version import __version__  # noqa: F401
from lambda_client_context.logger import initialize_logging
from lambda_client_context.config import config


initialize_logging(__name__)


from lambda_client_context.patch import patch_all  # noqa: E402

# Patch botocore before any handler code creates a Lambda client.
if config.patch_on_import:
    patch_all()
