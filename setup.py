from pathlib import Path
from setuptools import find_packages, setup


def read_requirements() -> list[str]:
    req_path = Path(__file__).parent / "requirements.txt"
    if not req_path.exists():
        return []
    return [line.strip() for line in req_path.read_text(encoding="utf-8").splitlines() if line.strip() and not line.startswith("#")]


setup(
    name="sumchecker",
    version="0.1.0",
    description="Validate files against sha256sum-style checksum manifests",
    packages=find_packages(include=["sumchecker", "sumchecker.*"]),
    install_requires=read_requirements(),
    extras_require={"test": ["pytest>=7"]},
    python_requires=">=3.10",
    include_package_data=True,
)
