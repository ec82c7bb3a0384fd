from __future__ import annotations

import pytest

from ec2domain.models import Region, RunningInstance


@pytest.fixture
def region() -> Region:
    return Region("us-east-1")


@pytest.fixture
def inst1(region: Region) -> RunningInstance:
    return RunningInstance(region=region, instance_id="i-1", image_id="ami-1", state="running")


@pytest.fixture
def inst2(region: Region) -> RunningInstance:
    return RunningInstance(region=region, instance_id="i-2", image_id="ami-1", state="pending")
