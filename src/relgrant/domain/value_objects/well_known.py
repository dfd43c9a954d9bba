"""Well-known subjects and objects with fixed names."""

# Subject standing for every unauthenticated caller.
ANONYMOUS_USER = "ANONYMOUS_USER"

# Collection every created user may read and update.
PUBLIC_COLLECTION = "PUBLIC_COLLECTION"

# Sentinel objects for global creation capabilities.
DATASETS_ADMINISTRATION = "DATASETS_ADMINISTRATION"
MACHINE_LEARNING_MODEL_ADMINISTRATION = "MACHINE_LEARNING_MODEL_ADMINISTRATION"
