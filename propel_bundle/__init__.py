# ==============================================
# Propel Bundle
# ==============================================
#
# Package Structure:
#
# propel_bundle/
# ├── command/     # propel:build-model (schema discovery + generator run)
# ├── orm/         # Table metadata, queries, MySQL reflection
# ├── form/        # ModelChoiceField + ModelFieldGuesser
# ├── config.py    # Configuration management
# └── cli.py       # Command line entry point
#
# ==============================================

__version__ = "0.1.0"
