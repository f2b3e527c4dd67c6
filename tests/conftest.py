"""Shared fixtures: a small Kubernetes-style swagger document."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

import pytest

from k8s_typegen.config import GeneratorConfig
from k8s_typegen.model import SchemaDocument, parse_document


def ref(name: str) -> dict[str, str]:
    return {"$ref": f"#/definitions/{name}"}


_SPEC: dict[str, Any] = {
    "swagger": "2.0",
    "info": {"title": "Kubernetes", "version": "v1.30.0"},
    "definitions": {
        "io.k8s.api.apps.v1.Deployment": {
            "description": "Deployment enables declarative updates for Pods and ReplicaSets.",
            "properties": {
                "apiVersion": {"description": "APIVersion defines the versioned schema.", "type": "string"},
                "kind": {"description": "Kind is a string value.", "type": "string"},
                "metadata": {"description": "Standard object's metadata.", **ref("io.k8s.apimachinery.pkg.apis.meta.v1.ObjectMeta")},
                "spec": {"description": "Specification of the desired behavior.", **ref("io.k8s.api.apps.v1.DeploymentSpec")},
            },
            "type": "object",
            "x-kubernetes-group-version-kind": [
                {"group": "apps", "kind": "Deployment", "version": "v1"},
            ],
        },
        "io.k8s.api.apps.v1.DeploymentSpec": {
            "description": "DeploymentSpec is the specification of the desired behavior of the Deployment.",
            "properties": {
                "replicas": {"description": "Number of desired pods.", "type": "integer", "format": "int32"},
                "template": {"description": "Template describes the pods that will be created.", **ref("io.k8s.api.core.v1.PodTemplateSpec")},
                "maxSurge": {"description": "Maximum number of pods above desired.", **ref("io.k8s.apimachinery.pkg.util.intstr.IntOrString")},
            },
            "required": ["template"],
            "type": "object",
        },
        "io.k8s.api.core.v1.Pod": {
            "description": "Pod is a collection of containers that can run on a host.",
            "properties": {
                "apiVersion": {"description": "APIVersion defines the versioned schema.", "type": "string"},
                "kind": {"description": "Kind is a string value.", "type": "string"},
                "metadata": {"description": "Standard object's metadata.", **ref("io.k8s.apimachinery.pkg.apis.meta.v1.ObjectMeta")},
                "spec": {"description": "Specification of the desired behavior of the pod.", **ref("io.k8s.api.core.v1.PodSpec")},
            },
            "type": "object",
            "x-kubernetes-group-version-kind": [
                {"group": "", "kind": "Pod", "version": "v1"},
            ],
        },
        "io.k8s.api.core.v1.PodSpec": {
            "description": "PodSpec is a description of a pod.",
            "properties": {
                "containers": {
                    "description": "List of containers belonging to the pod.",
                    "items": {"type": "string"},
                    "type": "array",
                },
                "nodeSelector": {
                    "additionalProperties": {"type": "string"},
                    "description": "NodeSelector is a selector which must be true for the pod to fit on a node.",
                    "type": "object",
                },
                "hostNetwork": {"description": "Host networking requested for this pod.", "type": "boolean"},
            },
            "required": ["containers"],
            "type": "object",
        },
        "io.k8s.api.core.v1.PodTemplateSpec": {
            "description": "PodTemplateSpec describes the data a pod should have when created from a template",
            "properties": {
                "metadata": {"description": "Standard object's metadata.", **ref("io.k8s.apimachinery.pkg.apis.meta.v1.ObjectMeta")},
                "spec": {"description": "Specification of the desired behavior of the pod.", **ref("io.k8s.api.core.v1.PodSpec")},
            },
            "type": "object",
        },
        "io.k8s.apimachinery.pkg.apis.meta.v1.ObjectMeta": {
            "description": "ObjectMeta is metadata that all persisted resources must have.",
            "properties": {
                "name": {"description": "Name must be unique within a namespace.", "type": "string"},
                "uid": {
                    "description": "UID is the unique in time and space value for this object.\n\n"
                                   "Populated by the system. Read-only. More info: http://kubernetes.io/docs/user-guide/identifiers#uids",
                    "type": "string",
                },
                "creationTimestamp": {
                    "description": "CreationTimestamp is a timestamp representing the server time.",
                    **ref("io.k8s.apimachinery.pkg.apis.meta.v1.Time"),
                },
                "labels": {
                    "additionalProperties": {"type": "string"},
                    "description": "Map of string keys and values.",
                    "type": "object",
                },
            },
            "type": "object",
        },
        "io.k8s.apimachinery.pkg.apis.meta.v1.Time": {
            "description": "Time is a wrapper around time.Time which supports correct marshaling to YAML and JSON.",
            "format": "date-time",
            "type": "string",
        },
        "io.k8s.apimachinery.pkg.util.intstr.IntOrString": {
            "description": "IntOrString is a type that can hold an int32 or a string.",
            "format": "int-or-string",
            "type": "string",
        },
        "io.k8s.kube-aggregator.pkg.apis.apiregistration.v1.APIService": {
            "description": "APIService represents a server for a particular GroupVersion.",
            "properties": {
                "metadata": {"description": "Standard object's metadata.", **ref("io.k8s.apimachinery.pkg.apis.meta.v1.ObjectMeta")},
            },
            "type": "object",
        },
    },
}


@pytest.fixture
def raw_spec() -> dict[str, Any]:
    """A fresh copy of the swagger payload, safe to mutate."""
    return copy.deepcopy(_SPEC)


@pytest.fixture
def document(raw_spec) -> SchemaDocument:
    return parse_document(raw_spec)


@pytest.fixture
def config() -> GeneratorConfig:
    return GeneratorConfig()


@pytest.fixture
def spec_file(tmp_path, raw_spec) -> Path:
    path = tmp_path / "swagger.json"
    path.write_text(json.dumps(raw_spec), encoding="utf-8")
    return path
