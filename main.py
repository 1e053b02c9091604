import importlib
import sys
import traceback

import app_constants


def load_feature(feature_name=app_constants.FEATURE_NAME, feature_version=app_constants.FEATURE_VERSION):
    module_path = f"features.{feature_name}.{feature_version}.{feature_name}"
    module = importlib.import_module(module_path)

    if not hasattr(module, "register"):
        raise Exception(f"Feature module does not have a register() function: {module_path}")

    return module.register()

def main():
    print(f"{app_constants.APP_NAME} {app_constants.APP_VERSION}", file=sys.stderr)
    try:
        feature = load_feature()
        feature.process()
    except Exception:
        traceback.print_exc()
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
