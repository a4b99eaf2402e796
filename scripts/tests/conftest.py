"""Shared test fixtures for the enforcer helper test suite."""

import textwrap

import pytest

from enforcer_helper.conflict_models import Conflict, DependencyNode


PROTOBUF_CONVERGENCE = """\
[ERROR] Failed to execute goal org.apache.maven.plugins:maven-enforcer-plugin:3.6.2:enforce (enforce-maven) on project coop-prepaid-ledger:
[ERROR] Rule 2: org.apache.maven.enforcer.rules.dependency.DependencyConvergence failed with message:
[ERROR] Failed while enforcing releasability.
[ERROR]
[ERROR] Dependency convergence error for com.google.protobuf:protobuf-java:jar:4.33.2. Paths to dependency are:
[ERROR] +-no.coop.giftcard:coop-prepaid-ledger:jar:1.local-SNAPSHOT
[ERROR]   +-com.google.cloud:google-cloud-core:jar:2.64.1:compile
[ERROR]     +-com.google.protobuf:protobuf-java:jar:4.33.2:compile
[ERROR] and
[ERROR] +-no.coop.giftcard:coop-prepaid-ledger:jar:1.local-SNAPSHOT
[ERROR]   +-com.google.cloud:google-cloud-core:jar:2.64.1:compile
[ERROR]     +-com.google.api.grpc:proto-google-common-protos:jar:2.65.1:compile
[ERROR]       +-com.google.protobuf:protobuf-java:jar:4.33.4:compile
"""

NETTY_CLASSIFIER = """\
[ERROR] Rule 2: org.apache.maven.enforcer.rules.dependency.DependencyConvergence failed with message:[ERROR] Failed while enforcing releasability.
[ERROR]
[ERROR] Dependency convergence error for io.netty:netty-transport-native-epoll:jar:linux-x86_64:4.1.130.Final. Paths to dependency are:
[ERROR] +-no.coop.giftcard:coop-prepaid-ledger:jar:1.local-SNAPSHOT
[ERROR]   +-com.azure:azure-storage-blob:jar:12.33.1:compile
[ERROR]     +-com.azure:azure-core-http-netty:jar:1.16.3:compile
[ERROR]       +-io.netty:netty-transport-native-epoll:jar:linux-x86_64:4.1.130.Final:compile
[ERROR] and
[ERROR] +-no.coop.giftcard:coop-prepaid-ledger:jar:1.local-SNAPSHOT
[ERROR]   +-com.azure:azure-storage-blob:jar:12.33.1:compile
[ERROR]     +-com.azure:azure-core-http-netty:jar:1.16.3:compile
[ERROR]       +-io.projectreactor.netty:reactor-netty-http:jar:1.2.13:compile
[ERROR]         +-io.netty:netty-transport-native-epoll:jar:linux-x86_64:4.1.128.Final:compile
[ERROR] and
[ERROR] +-no.coop.giftcard:coop-prepaid-ledger:jar:1.local-SNAPSHOT
[ERROR]   +-com.azure:azure-storage-blob:jar:12.33.1:compile
[ERROR]     +-com.azure:azure-core-http-netty:jar:1.16.3:compile
[ERROR]       +-io.projectreactor.netty:reactor-netty-http:jar:1.2.13:compile
[ERROR]         +-io.projectreactor.netty:reactor-netty-core:jar:1.2.13:compile
[ERROR]           +-io.netty:netty-transport-native-epoll:jar:linux-x86_64:4.1.128.Final:compile
"""

UPPER_BOUND = """\
[ERROR] Rule 0: org.apache.maven.enforcer.rules.dependency.RequireUpperBoundDeps failed with message:
[ERROR] Failed while enforcing RequireUpperBoundDeps. The error(s) are [
[ERROR] Require upper bound dependencies error for org.slf4j:slf4j-api:1.7.25 paths to dependency are:
[ERROR] +-com.example:demo:1.0-SNAPSHOT
[ERROR]   +-ch.qos.logback:logback-classic:1.2.3
[ERROR]     +-org.slf4j:slf4j-api:1.7.25 (managed) <-- org.slf4j:slf4j-api:1.7.36
[ERROR] ]
"""


@pytest.fixture
def enforcer_output():
    """Factory fixture that dedents hand-written enforcer output."""
    def _make(content: str) -> str:
        return textwrap.dedent(content)
    return _make


@pytest.fixture
def protobuf_conflict():
    """A protobuf-java-util conflict seen through two dependency paths."""
    root = DependencyNode("com.example", "app", "1.0.0")
    return Conflict(
        target=DependencyNode("com.google.protobuf", "protobuf-java-util", "4.33.4", "compile"),
        paths=[
            [root, DependencyNode("com.google.protobuf", "protobuf-java-util", "4.33.2", "compile")],
            [root, DependencyNode("com.google.protobuf", "protobuf-java-util", "4.33.4", "compile")],
        ],
        versions=["4.33.2", "4.33.4"],
        highest_version="4.33.4",
    )


@pytest.fixture
def guava_conflict():
    return Conflict(
        target=DependencyNode("com.google.guava", "guava", "33.4.0-jre"),
        paths=[[DependencyNode("com.google.guava", "guava", "33.4.0-jre")]],
        versions=["32.1.3-jre", "33.4.0-jre"],
        highest_version="33.4.0-jre",
    )


@pytest.fixture
def protobuf_output():
    return PROTOBUF_CONVERGENCE


@pytest.fixture
def netty_output():
    return NETTY_CLASSIFIER


@pytest.fixture
def upper_bound_output():
    return UPPER_BOUND
