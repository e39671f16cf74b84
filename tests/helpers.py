"""Shared builders for registry and pom.xml test fixtures."""

from pom_analyzer.graph_builder import ArtifactRegistry
from pom_analyzer.models import Coordinate


def coord(name, group="com.example"):
    return Coordinate(group, name)


def build_registry(*edges, nodes=()):
    """Registry from 'a->b' style edges; extra isolated nodes may be listed in nodes"""
    registry = ArtifactRegistry()
    for name in nodes:
        registry.get_or_create(coord(name))
    for edge in edges:
        src, dst = edge.split("->")
        registry.get_or_create(coord(src))
        registry.get_or_create(coord(dst))
        registry.add_dependency(coord(src), coord(dst))
    return registry


POM_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<project xmlns="http://maven.apache.org/POM/4.0.0">
  <modelVersion>4.0.0</modelVersion>
  {parent}
  {group}
  <artifactId>{artifact}</artifactId>
  <dependencies>
    {dependencies}
  </dependencies>
</project>
"""


def pom_xml(artifact, group="com.example", deps=(), parent_group=None):
    parent = ""
    if parent_group is not None:
        parent = (f"<parent><groupId>{parent_group}</groupId>"
                  f"<artifactId>parent</artifactId><version>1</version></parent>")
    group_tag = f"<groupId>{group}</groupId>" if group is not None else ""
    dependencies = "\n    ".join(
        f"<dependency><groupId>{g}</groupId><artifactId>{a}</artifactId></dependency>"
        for g, a in deps
    )
    return POM_TEMPLATE.format(parent=parent, group=group_tag, artifact=artifact, dependencies=dependencies)


