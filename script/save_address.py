import json
from pathlib import Path

from eth_utils import is_address, to_checksum_address

from script.network import active_network_name

DEPLOYMENTS_FOLDER = Path("deployments")


def record_path(name: str, folder: Path | str = DEPLOYMENTS_FOLDER, network_name: str | None = None) -> Path:
    if network_name is None:
        network_name = active_network_name()
    return Path(folder) / network_name / f"{name}.json"


def save_address(
    name: str,
    addresses: dict[str, str],
    folder: Path | str = DEPLOYMENTS_FOLDER,
    network_name: str | None = None,
) -> Path:
    """
    Persists a named record of deployed addresses as JSON.

    The record lands in ``<folder>/<network>/<name>.json`` and replaces any
    previous record of the same name on that network.

    Args:
        name: Record name, e.g. ``YFO_Migrate``.
        addresses: Mapping of record key to contract address.
        folder: Root folder for deployment records.
        network_name: Defaults to the active moccasin network.

    Returns:
        Path: The file that was written.

    Raises:
        ValueError: If the mapping is empty or holds an empty or invalid address.
    """
    if not addresses:
        raise ValueError(f"Record {name!r} has no addresses")

    checksummed = {}
    for key, address in addresses.items():
        if not address or not is_address(str(address)):
            raise ValueError(f"Record {name!r}: {key} is not a valid address: {address!r}")
        checksummed[key] = to_checksum_address(str(address))

    path = record_path(name, folder, network_name)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(checksummed, f, indent=2)
    print(f"Saved {name} addresses to {path}")
    return path


def load_address(
    name: str,
    folder: Path | str = DEPLOYMENTS_FOLDER,
    network_name: str | None = None,
) -> dict[str, str]:
    with open(record_path(name, folder, network_name)) as f:
        return json.load(f)
