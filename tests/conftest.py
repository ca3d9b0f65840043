import pytest

from openharmony.config import SearchSettings
from scene import InMemoryHost, Scene

# (path, type, timeline index) in host enumeration order
SAMPLE_NODES = [
    ("Top", "GROUP", None),
    ("Top/Display", "DISPLAY", None),
    ("Top/Composite", "COMPOSITE", None),
    ("Top/Peg1", "PEG", 2),
    ("Top/Drawing1", "READ", 3),
    ("Top/Group1", "GROUP", 1),
    ("Top/Group1/Peg2", "PEG", 4),
    ("Top/Group1/Drawing2", "READ", 0),
    ("Top/A1", "READ", 5),
    ("Top/B,C", "READ", 6),
]


@pytest.fixture
def host():
    """A small scene with a nested group and two selected nodes."""
    host = InMemoryHost(default_display="Top/Display")
    for path, node_type, index in SAMPLE_NODES:
        host.add_node(path, node_type, index)
    host.select("Top/Peg1", "Top/Group1")
    return host


@pytest.fixture
def scene(host):
    return Scene(host)


@pytest.fixture
def directory(scene):
    return scene.directory


@pytest.fixture
def startswith_scene(host):
    """Scene where 're:<pattern>' terms are regexes."""
    return Scene(host, SearchSettings(regex_prefix_mode="startswith"))
