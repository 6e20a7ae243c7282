import pytest

from blobworld.clouds import Cloud
from blobworld.entities import Blob
from blobworld.interaction import resolve_cloud_contacts


def make_blob(scene, pos=(100.0, 100.0), velocity=(2.0, -3.0)):
    b = Blob(scene)
    b.pos = list(pos)
    b.velocity = list(velocity)
    return b


def test_overlap_pushes_cloud_along_blob_velocity(scene):
    blob = make_blob(scene)
    cloud = Cloud(pos=[110.0, 100.0], velocity=[0.0, 0.0], size=60)
    assert resolve_cloud_contacts(blob, [cloud]) == 1
    # 0.15 * blob velocity plus 0.05 along the cloud->blob unit vector (-1, 0)
    assert cloud.velocity[0] == pytest.approx(2.0 * 0.15 - 0.05)
    assert cloud.velocity[1] == pytest.approx(-3.0 * 0.15)


def test_blob_is_never_pushed_back(scene):
    blob = make_blob(scene)
    cloud = Cloud(pos=[105.0, 95.0], velocity=[1.0, 1.0], size=70)
    resolve_cloud_contacts(blob, [cloud])
    assert blob.velocity == [2.0, -3.0]
    assert blob.pos == [100.0, 100.0]


def test_clouds_out_of_reach_untouched(scene):
    blob = make_blob(scene)
    far = Cloud(pos=[200.0, 100.0], velocity=[-0.3, 0.0], size=60)
    assert resolve_cloud_contacts(blob, [far]) == 0
    assert far.velocity == [-0.3, 0.0]


def test_touching_exactly_at_reach_is_not_contact(scene):
    blob = make_blob(scene)
    # reach = 26 + 60 * 0.5 = 56
    edge = Cloud(pos=[156.0, 100.0], velocity=[0.0, 0.0], size=60)
    assert resolve_cloud_contacts(blob, [edge]) == 0
    assert edge.velocity == [0.0, 0.0]


def test_coincident_centres_are_a_no_op(scene):
    blob = make_blob(scene)
    cloud = Cloud(pos=[100.0, 100.0], velocity=[-0.3, 0.0], size=60)
    assert resolve_cloud_contacts(blob, [cloud]) == 0
    assert cloud.velocity == [-0.3, 0.0]


def test_only_overlapping_clouds_counted(scene):
    blob = make_blob(scene, velocity=(0.0, 0.0))
    near = Cloud(pos=[100.0, 130.0], velocity=[0.0, 0.0], size=50)
    far = Cloud(pos=[400.0, 30.0], velocity=[0.0, 0.0], size=50)
    assert resolve_cloud_contacts(blob, [near, far]) == 1
    # pure separation impulse, pointing from cloud toward the blob
    assert near.velocity[0] == pytest.approx(0.0)
    assert near.velocity[1] == pytest.approx(-0.05)
    assert far.velocity == [0.0, 0.0]
