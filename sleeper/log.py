import logging
import logging.config


def build_log_config(log_filename=None):
    """Build the dictConfig used by the CLI and the test harness."""
    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S"
            },
            "detailed": {
                "format": "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S"
            }
        },
        "handlers": {
            # stdout belongs to the countdown line
            "console": {
                "class": "logging.StreamHandler",
                "level": "WARNING",
                "formatter": "standard",
                "stream": "ext://sys.stderr"
            }
        },
        "loggers": {
            "": {
                "handlers": ["console"],
                "level": "DEBUG",
                "propagate": True
            }
        }
    }
    if log_filename:
        config["handlers"]["file"] = {
            "class": "logging.FileHandler",
            "level": "DEBUG",
            "formatter": "detailed",
            "filename": log_filename,
            "mode": "a"
        }
        config["loggers"][""]["handlers"].append("file")
    return config


def configure_logging(log_filename=None):
    """Configure the root logger; falls back to basicConfig if that fails."""
    try:
        logging.config.dictConfig(build_log_config(log_filename))
    except (ValueError, TypeError, AttributeError, ImportError) as e:
        handlers = [logging.StreamHandler()]
        if log_filename:
            handlers.append(logging.FileHandler(log_filename))
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(message)s',
            handlers=handlers,
            force=True
        )
        logging.warning(f"Could not load logging config: {str(e)}. Using basic configuration.")
