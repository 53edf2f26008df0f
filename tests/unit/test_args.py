"""
Unit tests for rendezvous launch-argument injection.

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""

import pytest

from elasticjob.controller.args import (
    LAUNCH_SENTINEL,
    build_launch_args,
    find_insertion_index,
    insert_launch_args,
)


BLOCK = ["--rdvz", "etcd"]


@pytest.mark.unit
class TestInsertLaunchArgs:
    """Test insertion point policy."""

    def test_prepends_when_sentinel_absent(self):
        """Launcher in the command: block goes before the script."""
        args = ["run.py", "--arg1", "val1"]

        result = insert_launch_args(args, BLOCK)

        assert result == ["--rdvz", "etcd", "run.py", "--arg1", "val1"]

    def test_inserts_after_sentinel(self):
        args = [
            "python", "run.py", "python", "-m", "torchelastic.distributed.launch",
            "script.py", "--arg1", "val1",
        ]

        result = insert_launch_args(args, BLOCK)

        assert result == [
            "python", "run.py", "python", "-m", "torchelastic.distributed.launch",
            "--rdvz", "etcd", "script.py", "--arg1", "val1",
        ]

    def test_uses_last_sentinel(self):
        args = [LAUNCH_SENTINEL, "a.py", LAUNCH_SENTINEL, "b.py"]

        result = insert_launch_args(args, BLOCK)

        assert result == [LAUNCH_SENTINEL, "a.py", LAUNCH_SENTINEL, "--rdvz", "etcd", "b.py"]

    def test_sentinel_as_last_arg_appends(self):
        args = ["-m", LAUNCH_SENTINEL]

        assert insert_launch_args(args, BLOCK) == ["-m", LAUNCH_SENTINEL, "--rdvz", "etcd"]

    def test_none_args_yields_block(self):
        assert insert_launch_args(None, BLOCK) == BLOCK

    def test_does_not_mutate_inputs(self):
        args = ["run.py"]
        block = list(BLOCK)

        result = insert_launch_args(args, block)
        result.append("--extra")

        assert args == ["run.py"]
        assert block == BLOCK

    def test_not_idempotent(self):
        """Injecting twice duplicates the block; exactly-once is the caller's job."""
        once = insert_launch_args(["run.py"], BLOCK)
        twice = insert_launch_args(once, BLOCK)

        assert twice == ["--rdvz", "etcd", "--rdvz", "etcd", "run.py"]

    def test_block_order_preserved_without_dedupe(self):
        block = ["--b", "--a", "--b"]

        assert insert_launch_args(["x"], block) == ["--b", "--a", "--b", "x"]

    def test_custom_sentinel(self):
        args = ["-m", "torch.distributed.run", "train.py"]

        result = insert_launch_args(args, BLOCK, sentinel="torch.distributed.run")

        assert result == ["-m", "torch.distributed.run", "--rdvz", "etcd", "train.py"]


@pytest.mark.unit
class TestFindInsertionIndex:
    """Test the backwards scan."""

    @pytest.mark.parametrize("args,expected", [
        ([], 0),
        (["run.py"], 0),
        ([LAUNCH_SENTINEL], 1),
        (["-m", LAUNCH_SENTINEL, "x.py"], 2),
        ([LAUNCH_SENTINEL, "x.py", LAUNCH_SENTINEL, "y.py"], 3),
    ])
    def test_index(self, args, expected):
        assert find_insertion_index(args) == expected

    def test_exact_match_only(self):
        assert find_insertion_index(["torchelastic.distributed.launcher"]) == 0


@pytest.mark.unit
class TestBuildLaunchArgs:
    """Test the rendezvous argument block."""

    def test_default_block(self, elastic_job):
        result = build_launch_args(elastic_job, 2, 4)

        assert result == [
            "--rdzv_backend=etcd",
            "--rdzv_endpoint=etcd-service:2379",
            "--rdzv_id=imagenet",
            "--nnodes=2:4",
        ]

    def test_custom_backend(self, elastic_job):
        result = build_launch_args(elastic_job, 1, 1, rdzv_backend="c10d")

        assert result[0] == "--rdzv_backend=c10d"
        assert result[-1] == "--nnodes=1:1"
