from dataclasses import dataclass


@dataclass
class ResourceGroup:
    name: str
    region: str
    id: str = ""


@dataclass
class ManagedResource:
    name: str
    region: str
    group: str             # owning resource group name
    sku: str = "Standard_LRS"
    id: str = ""
    kind: str = "StorageV2"


@dataclass
class GenericResource:
    name: str
    resource_type: str     # e.g. "Microsoft.Storage/storageAccounts"
    id: str = ""
    region: str = ""
