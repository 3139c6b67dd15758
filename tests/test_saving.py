import numpy as np
import pytest

from depthcluster.cloud import Cloud
from depthcluster.rich_point import RichPoint
from depthcluster.saving import (
    CloudSaver,
    VectorCloudSaver,
    with_leading_zeros,
    write_pcd_binary,
)


def _read_pcd(path):
    content = path.read_bytes()
    marker = b"DATA binary\n"
    end = content.index(marker) + len(marker)
    header_lines = content[:end].decode("ascii").splitlines()
    header = {}
    for line in header_lines:
        if line.startswith("#"):
            continue
        key, _, value = line.partition(" ")
        header[key] = value
    dtype = np.dtype([("x", "<f4"), ("y", "<f4"), ("z", "<f4"), ("label", "<u4")])
    return header, np.frombuffer(content[end:], dtype=dtype)


def _cloud():
    return Cloud([RichPoint(1.0, 2.0, 3.0, 4), RichPoint(-0.5, 0.25, 8.0, 17)])


def test_with_leading_zeros():
    assert with_leading_zeros(0) == "000000"
    assert with_leading_zeros(42) == "000042"
    assert len(with_leading_zeros(123456)) == 6


def test_write_pcd_round_trip(tmp_path):
    cloud = _cloud()
    path = tmp_path / "out.pcd"
    write_pcd_binary(path, cloud)
    header, records = _read_pcd(path)
    assert header["FIELDS"] == "x y z label"
    assert header["POINTS"] == str(len(cloud))
    assert header["WIDTH"] == str(len(cloud))
    assert len(records) == len(cloud)
    for record, point in zip(records, cloud):
        assert (float(record["x"]), float(record["y"]), float(record["z"])) == (
            point.x,
            point.y,
            point.z,
        )
        assert int(record["label"]) == point.ring


def test_write_pcd_rejects_empty_cloud(tmp_path):
    with pytest.raises(ValueError):
        write_pcd_binary(tmp_path / "empty.pcd", Cloud())


def test_vector_saver_saves_every_nth(tmp_path):
    prefix = str(tmp_path / "run")
    saver = VectorCloudSaver(prefix, save_every=2)
    clusters = {3: _cloud(), 9: Cloud([RichPoint(0.0, 0.0, 1.0)])}
    results = [saver.on_new_object_received(clusters, 0) for _ in range(3)]
    assert results[1] is None
    assert results[0] == tmp_path / f"run_{with_leading_zeros(0)}"
    assert results[2] == tmp_path / f"run_{with_leading_zeros(2)}"
    assert not (tmp_path / f"run_{with_leading_zeros(1)}").exists()
    names = sorted(p.name for p in results[0].iterdir())
    assert names == [
        f"cloud_{with_leading_zeros(0)}.pcd",
        f"cloud_{with_leading_zeros(1)}.pcd",
    ]
    _, records = _read_pcd(results[0] / names[0])
    assert len(records) == len(clusters[3])


def test_vector_saver_skips_existing_folder(tmp_path):
    prefix = str(tmp_path / "run")
    (tmp_path / f"run_{with_leading_zeros(0)}").mkdir()
    saver = VectorCloudSaver(prefix)
    assert saver.on_new_object_received({1: _cloud()}, 0) is None
    assert list((tmp_path / f"run_{with_leading_zeros(0)}").iterdir()) == []


def test_vector_saver_rejects_zero_interval():
    with pytest.raises(ValueError):
        VectorCloudSaver("run", save_every=0)


def test_cloud_saver_numbers_files(tmp_path):
    saver = CloudSaver(str(tmp_path / "scan"))
    first = saver.on_new_object_received(_cloud(), 0)
    second = saver.on_new_object_received(_cloud(), 0)
    assert first == tmp_path / "scan_0.pcd"
    assert second == tmp_path / "scan_1.pcd"
    _, records = _read_pcd(second)
    assert [int(label) for label in records["label"]] == [p.ring for p in _cloud()]