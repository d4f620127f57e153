"""
Model Exports

Response models for every CircleCI operation.
"""

from circleci_client.models.artifact import Artifact
from circleci_client.models.base import CircleCIModel
from circleci_client.models.build import (
    Build,
    BuildAction,
    BuildMessage,
    BuildNode,
    BuildStep,
    BuildSummary,
    BuildUser,
    CircleYml,
    CommitDetails,
    DetailedBuildSummary,
    PreviousBuild,
)
from circleci_client.models.cache import ClearCacheResponse
from circleci_client.models.project import AWSSettings, BranchStatus, Project
from circleci_client.models.user import FollowedProject, Me

__all__ = [
    "Artifact",
    "AWSSettings",
    "BranchStatus",
    "Build",
    "BuildAction",
    "BuildMessage",
    "BuildNode",
    "BuildStep",
    "BuildSummary",
    "BuildUser",
    "CircleCIModel",
    "CircleYml",
    "ClearCacheResponse",
    "CommitDetails",
    "DetailedBuildSummary",
    "FollowedProject",
    "Me",
    "PreviousBuild",
    "Project",
]
