from ruamel.yaml import YAML


def get_yaml_instance(typ: str = "safe") -> YAML:
    yaml = YAML(typ=typ, pure=True)
    yaml.default_flow_style = False
    yaml.width = 4096
    return yaml
