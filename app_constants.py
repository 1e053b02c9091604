APP_NAME = "Feature Host"
APP_VERSION = "0.1"

# features/<name>/<version>/<name>.py
FEATURE_NAME = "feature"
FEATURE_VERSION = "v4"
