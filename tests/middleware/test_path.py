from fargate_infra.middleware import Artifact


def test_artifact_paths(tmp_path):
    artifact = Artifact(version="20240101000000", job_type="synth", root=tmp_path)

    assert artifact.key_prefix == "synth/20240101000000"
    assert artifact.dir_path.is_dir()
    assert artifact.file_path("log.txt") == tmp_path / "synth" / "20240101000000" / "log.txt"
