import shlex

from hostexpr.config import (
    _global_options,
    all_options,
    as_environment_variable,
    default_config_files,
    use_config,
)


def cli_env():
    """Print hostexpr environment variables"""
    with use_config(*default_config_files()):
        all_options()

    for k, option in _global_options.items():
        env_name = as_environment_variable(k)
        value = option["value"]
        default = option["default"]

        if value is None or value == default:
            print("# ", end="")

        print(f"export {env_name}={shlex.quote(str(value))}")

    return 0


if __name__ == "__main__":
    cli_env()
