"""Shared utilities"""
import io
import yaml


def is_multiline(s):
    """Returns True if the string contains more than one line"""
    return s.find('\n') != -1


def represent_str(dumper, data):
    """Allows PyYaml module to dump strings as literals """
    if is_multiline(data):
        return dumper.represent_scalar('tag:yaml.org,2002:str', data, style='|')
    return dumper.represent_scalar('tag:yaml.org,2002:str', data)


yaml.add_representer(str, representer=represent_str)


def dumps_yaml(obj):
    """Attempt to dump `obj` to a YAML string"""
    stream = io.StringIO()
    yaml.dump(obj, stream=stream, default_flow_style=False)
    return stream.getvalue()
