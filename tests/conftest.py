from typing import Any, Dict

import pytest


def _config_dict() -> Dict[str, Any]:
    return {
        "folder_id": "b1g-folder",
        "username": "alice",
        "resources": {
            "image": {
                "family": "ubuntu-2204",
                "folder_family_id": "standard-images",
            },
            "name": "unit-test-vm",
            "resources_spec": {
                "memory": 2 * 1024 ** 3,
                "cores": 2,
            },
            "boot_disk_spec": {
                "auto_delete": True,
                "disk_spec": {
                    "type_id": "network-ssd",
                    "size": 20 * 1024 ** 3,
                },
            },
            "zone_id": "ru-central1-a",
            "platform_id": "standard-v3",
            "subnet_id": "e9b-subnet",
        },
        "metadata": {
            "ssh-keys": "USERNAME:SSH_PUBLIC_KEY",
            "user-data": "#cloud-config\nusers:\n  - name: USERNAME\n    ssh_authorized_keys:\n      - SSH_PUBLIC_KEY\n",
        },
        "labels": {
            "env": "test",
        },
    }


@pytest.fixture
def config_dict() -> Dict[str, Any]:
    return _config_dict()
