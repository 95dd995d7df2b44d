"""Serialization of manifest specs to manifest-tool YAML."""

import io

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap, CommentedSeq

from manifest_plugin.models.manifest import ManifestSpec


def get_yaml_instance() -> YAML:
    """YAML dumper producing block style with 2-space sequence indentation."""
    yaml = YAML(typ="rt")
    yaml.default_flow_style = False
    yaml.explicit_start = False
    yaml.width = 4096
    yaml.indent(mapping=2, sequence=2, offset=0)
    return yaml


def manifest_spec_to_map(spec: ManifestSpec) -> CommentedMap:
    """Map a spec to the field order manifest-tool expects."""
    manifests = CommentedSeq()
    for component in spec.manifests:
        platform = CommentedMap()
        platform["os"] = component.platform.os
        platform["architecture"] = component.platform.architecture
        if component.platform.variant:
            platform["variant"] = component.platform.variant

        entry = CommentedMap()
        entry["image"] = component.image
        entry["platform"] = platform
        manifests.append(entry)

    data = CommentedMap()
    data["image"] = spec.image
    data["manifests"] = manifests
    return data


def render_manifest_spec(spec: ManifestSpec) -> bytes:
    """Render a spec file body."""
    stream = io.StringIO()
    get_yaml_instance().dump(manifest_spec_to_map(spec), stream)
    return stream.getvalue().encode("utf-8")
