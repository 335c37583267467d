APP_NAME = "Goldphin AI Backend"
APP_VERSION = "1.0.0"
