"""
In-memory stand-in for azresource.client.ResourceManager.
"""
from typing import Dict, List, Optional

import pytest

from azresource.models.resource import GenericResource, ManagedResource, ResourceGroup

SUBSCRIPTION = "00000000-0000-0000-0000-000000000000"


def storage_id(group: str, name: str) -> str:
    return (
        f"/subscriptions/{SUBSCRIPTION}/resourceGroups/{group}"
        f"/providers/Microsoft.Storage/storageAccounts/{name}"
    )


class FakeManager:
    def __init__(
        self,
        errors: Optional[Dict[str, Exception]] = None,
        generic: Optional[List[GenericResource]] = None,
        generic_error_after: Optional[int] = None,
    ):
        self.errors = errors or {}
        self.generic = generic or []
        self.generic_error_after = generic_error_after
        self.calls: List[tuple] = []
        self.groups: Dict[str, ResourceGroup] = {}
        self.accounts: Dict[str, ManagedResource] = {}

    def _record(self, op: str, *args):
        self.calls.append((op,) + args)
        if op in self.errors:
            raise self.errors[op]

    @property
    def ops(self) -> List[str]:
        return [c[0] for c in self.calls]

    def create_resource_group(self, name, region):
        self._record("create_resource_group", name, region)
        self.groups[name] = ResourceGroup(name=name, region=region, id=f"/subscriptions/{SUBSCRIPTION}/resourceGroups/{name}")
        return self.groups[name]

    def begin_delete_resource_group(self, name, wait=False):
        self._record("begin_delete_resource_group", name, wait)
        self.groups.pop(name, None)

    def create_storage_account(self, name, region, group, sku="Standard_LRS"):
        self._record("create_storage_account", name, region, group, sku)
        account = ManagedResource(name=name, region=region, group=group, sku=sku, id=storage_id(group, name))
        self.accounts[account.id] = account
        return account

    def update_storage_account_sku(self, account, sku):
        self._record("update_storage_account_sku", account.name, sku)
        updated = ManagedResource(
            name=account.name, region=account.region, group=account.group, sku=sku, id=account.id
        )
        self.accounts[account.id] = updated
        return updated

    def list_storage_accounts(self, group):
        self._record("list_storage_accounts", group)
        for account in list(self.accounts.values()):
            if account.group == group:
                yield account

    def delete_storage_account_by_id(self, resource_id):
        self._record("delete_storage_account_by_id", resource_id)
        del self.accounts[resource_id]

    def list_generic_resources(self):
        self._record("list_generic_resources")
        for i, res in enumerate(self.generic):
            if self.generic_error_after is not None and i == self.generic_error_after:
                raise RuntimeError("listing interrupted")
            yield res


@pytest.fixture
def fake_manager():
    return FakeManager()


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Keep the real environment and working directory out of every test."""
    for var in (
        "AZURE_TENANT_ID", "AZURE_CLIENT_ID", "AZURE_CLIENT_SECRET",
        "AZURE_SUBSCRIPTION_ID", "AZURE_CLOUD", "AZURE_REGION",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
