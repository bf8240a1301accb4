from src.config.logger_config import logger
from src.docsync.application.use_cases.sync_site_content import EXIT_CONFIGURATION_ERROR
from src.docsync.domain.errors import MappingConfigurationError
from src.docsync.sync import run_sync


def main() -> int:
    try:
        result = run_sync()
    except MappingConfigurationError as exc:
        logger.error("Mapping table rejected, nothing written: {}", exc)
        return EXIT_CONFIGURATION_ERROR
    return result.exit_code


# python -m src.docsync
if __name__ == "__main__":
    raise SystemExit(main())
