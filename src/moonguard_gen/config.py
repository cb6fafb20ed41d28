# src/moonguard_gen/config.py
from types import MappingProxyType

from moonguard_gen.models import LanguageConfig

PROTOC_BINARY = "protoc"

DEFAULT_OUT_DIR = "./moonguard-clients"

SUPPORTED_LANGUAGES = MappingProxyType({
    "go": LanguageConfig(
        name="go",
        flag_template="--go_out=plugins=grpc:",
        subdir="go",
    ),
})
