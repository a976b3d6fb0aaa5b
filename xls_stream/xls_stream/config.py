"""
Configuration loader for xls_stream.yaml files.

Environment Variables:
    XLS_STREAM_CONFIG: Path to the config file
    XLS_STREAM_OUTPUT: Overrides sink.path
    XLS_STREAM_STRICT: Overrides writer.strict ("1", "true", "yes" enable it)
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import InvalidParamError
from .sink import BufferSink, FileSink, S3Sink, Sink
from .writer import XLSWriter

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "xls_stream.yaml"

_TRUE_VALUES = ("1", "true", "yes", "on")


class WriterConfig:
    """Configuration loaded from xls_stream.yaml"""

    def __init__(self, config_dict: Optional[Dict[str, Any]] = None):
        self._config = config_dict or {}

    @property
    def sink_type(self) -> str:
        """Get the configured sink type (file, s3, memory)"""
        return self.sink_config.get('type', 'file')

    @property
    def sink_config(self) -> Dict[str, Any]:
        """Get sink-specific configuration"""
        return self._config.get('sink') or {}

    @property
    def output_path(self) -> str:
        """Output file for the file sink"""
        env_path = os.environ.get('XLS_STREAM_OUTPUT')
        if env_path:
            return env_path
        return self.sink_config.get('path', 'output.xls')

    @property
    def strict(self) -> bool:
        """Whether writers reject records that are out of document order"""
        env_strict = os.environ.get('XLS_STREAM_STRICT')
        if env_strict is not None:
            return env_strict.strip().lower() in _TRUE_VALUES
        return bool((self._config.get('writer') or {}).get('strict', False))

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by key"""
        return self._config.get(key, default)


def load_config(config_path: Optional[str] = None) -> WriterConfig:
    """
    Load configuration from xls_stream.yaml.

    Search order:
    1. Provided config_path
    2. XLS_STREAM_CONFIG environment variable
    3. ./xls_stream.yaml in current directory
    4. xls_stream.yaml in parent directories (walk up the tree)

    Args:
        config_path: Optional explicit path to config file

    Returns:
        WriterConfig instance (defaults if no file was found)

    Raises:
        FileNotFoundError: If an explicitly named config file does not exist
    """
    if config_path:
        return _load_from_path(config_path)

    env_path = os.environ.get('XLS_STREAM_CONFIG')
    if env_path:
        return _load_from_path(env_path)

    current = Path.cwd()
    while True:
        config_file = current / CONFIG_FILENAME
        if config_file.exists():
            return _load_from_path(str(config_file))

        # Stop at filesystem root
        if current == current.parent:
            break
        current = current.parent

    return WriterConfig({})


def _load_from_path(path: str) -> WriterConfig:
    """Load config from a specific path"""
    with open(path, 'r', encoding='utf-8') as f:
        if path.endswith('.json'):
            config_dict = json.load(f)
        else:
            config_dict = yaml.safe_load(f) or {}
    logger.debug(f"Loaded config from {path}")
    return WriterConfig(config_dict)


def open_sink(config: WriterConfig) -> Sink:
    """
    Create the sink described by the config.

    Raises:
        InvalidParamError: For an unknown sink type or missing S3 settings
    """
    sink_type = config.sink_type
    settings = config.sink_config

    if sink_type == 'file':
        return FileSink(config.output_path)
    if sink_type == 'memory':
        return BufferSink()
    if sink_type == 's3':
        bucket = settings.get('bucket')
        key = settings.get('key')
        if not bucket or not key:
            raise InvalidParamError("S3 sink requires sink.bucket and sink.key")
        return S3Sink(
            bucket=bucket,
            key=key,
            spool_dir=settings.get('spool_dir'),
            keep_local=bool(settings.get('keep_local', False)),
        )

    raise InvalidParamError(f"Unknown sink type: {sink_type!r}")


def open_writer(config: Optional[WriterConfig] = None) -> XLSWriter:
    """Create a writer over the configured sink."""
    config = config or load_config()
    return XLSWriter(open_sink(config), strict=config.strict)
