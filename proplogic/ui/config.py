import os
import yaml

class ConfigError(Exception):
    pass

class Config(object):

    #
    # YAML configuration, every key is optional:
    #
    #   passes: [optimize, de_morgan]       # rewrite passes used by "show"
    #   expectative: true                   # truth value to derive requirements for
    #   normalize: false                    # normalize derived requirements
    #   log:
    #       output: "2>"                    # "-", "2>" or file path
    #       debug: false
    #

    EnvVar = "PROPLOGIC_CONFIG"
    Passes = ("optimize", "de_morgan", "simplify", "apply")

    Defaults = {
        "passes":       ["optimize", "de_morgan"],
        "expectative":  True,
        "normalize":    False,
        "log":          {}
    }

    def __init__(self, cfg_file=None):
        config = None
        if isinstance(cfg_file, str):
            with open(cfg_file, "r") as f:
                config = yaml.load(f, Loader=yaml.SafeLoader)
        elif cfg_file is not None:
            config = yaml.load(cfg_file, Loader=yaml.SafeLoader)
        config = config or {}
        if not isinstance(config, dict):
            raise ConfigError("Configuration must be a dictionary")
        self.Config = self.Defaults.copy()
        self.Config.update(config)
        self.validate()

    @staticmethod
    def load(path=None):
        path = path or os.environ.get(Config.EnvVar)
        return Config(path)

    def validate(self):
        passes = self.Config["passes"]
        if isinstance(passes, str):
            passes = self.Config["passes"] = [passes]
        if not isinstance(passes, list):
            raise ConfigError("passes must be a list")
        for name in passes:
            if name not in self.Passes:
                raise ConfigError(f"Unknown pass {name}, expected one of: " + ", ".join(self.Passes))
        if not isinstance(self.Config["expectative"], bool):
            raise ConfigError("expectative must be true or false")
        if not isinstance(self.Config["log"], dict):
            raise ConfigError("log must be a dictionary")

    def __getitem__(self, name):
        return self.Config[name]

    def get(self, name, default=None):
        return self.Config.get(name, default)

    def log_config(self):
        log = self.Config["log"]
        return log.get("output", "2>"), bool(log.get("debug", False))
