"""
Thin facade over the Azure management SDKs.

Only the capabilities the workflow and the lister consume are exposed; all
transport, retry and pagination behavior stays inside the SDK clients.
"""
from typing import Any, Iterator, Union

from azure.identity import ClientSecretCredential, DefaultAzureCredential
from azure.mgmt.core.tools import parse_resource_id
from azure.mgmt.resource import ResourceManagementClient
from azure.mgmt.storage import StorageManagementClient
from azure.mgmt.storage.models import Sku, StorageAccountCreateParameters

from azresource.config import Profile, Settings
from azresource.models.resource import GenericResource, ManagedResource, ResourceGroup

Credential = Union[ClientSecretCredential, DefaultAzureCredential]

_STORAGE_TYPE = "Microsoft.Storage/storageAccounts"


def credential_from_settings(settings: Settings) -> Credential:
    authority = settings.profile().environment.authority_host
    if settings.client_secret:
        return ClientSecretCredential(
            tenant_id=settings.tenant_id,
            client_id=settings.client_id,
            client_secret=settings.client_secret,
            authority=authority,
        )
    return DefaultAzureCredential(authority=authority)


def _to_account(account: Any, group: str) -> ManagedResource:
    return ManagedResource(
        name=account.name,
        region=account.location,
        group=group,
        sku=account.sku.name if account.sku else "",
        id=account.id,
        kind=account.kind or "",
    )


class ResourceManager:
    def __init__(self, resource_client: Any, storage_client: Any) -> None:
        self.resource_client = resource_client
        self.storage_client = storage_client

    # ------------------------------------------------ Resource groups
    def create_resource_group(self, name: str, region: str) -> ResourceGroup:
        rg = self.resource_client.resource_groups.create_or_update(name, {"location": region})
        return ResourceGroup(name=rg.name, region=rg.location, id=rg.id)

    def begin_delete_resource_group(self, name: str, wait: bool = False) -> Any:
        """
        Request deletion of a resource group.

        The returned poller is only waited on when ``wait`` is true; otherwise
        deletion continues on the Azure side after this call returns.
        """
        poller = self.resource_client.resource_groups.begin_delete(name)
        if wait:
            poller.result()
        return poller

    # ------------------------------------------------ Storage accounts
    def create_storage_account(
        self, name: str, region: str, group: str, sku: str = "Standard_LRS"
    ) -> ManagedResource:
        params = StorageAccountCreateParameters(
            sku=Sku(name=sku), kind="StorageV2", location=region
        )
        account = self.storage_client.storage_accounts.begin_create(group, name, params).result()
        return _to_account(account, group)

    def update_storage_account_sku(self, account: ManagedResource, sku: str) -> ManagedResource:
        # PUT with the complete definition: replaces, does not patch.
        params = StorageAccountCreateParameters(
            sku=Sku(name=sku), kind=account.kind or "StorageV2", location=account.region
        )
        updated = self.storage_client.storage_accounts.begin_create(
            account.group, account.name, params
        ).result()
        return _to_account(updated, account.group)

    def list_storage_accounts(self, group: str) -> Iterator[ManagedResource]:
        for account in self.storage_client.storage_accounts.list_by_resource_group(group):
            yield _to_account(account, group)

    def delete_storage_account_by_id(self, resource_id: str) -> None:
        parts = parse_resource_id(resource_id)
        group = parts.get("resource_group")
        name = parts.get("name")
        rtype = f"{parts.get('namespace', '')}/{parts.get('type', '')}"
        if not group or not name or rtype.lower() != _STORAGE_TYPE.lower():
            raise ValueError(f"Not a storage account resource id: '{resource_id}'")
        self.storage_client.storage_accounts.delete(group, name)

    # ------------------------------------------------ Generic resources
    def list_generic_resources(self) -> Iterator[GenericResource]:
        """Lazily enumerate every resource in the subscription."""
        for res in self.resource_client.resources.list():
            yield GenericResource(
                name=res.name,
                resource_type=res.type,
                id=res.id or "",
                region=res.location or "",
            )


def authenticate(credential: Credential, profile: Profile) -> ResourceManager:
    """Bind management clients for ``profile``'s subscription and cloud."""
    env = profile.environment
    kwargs = {
        "base_url": env.resource_manager,
        "credential_scopes": [env.credential_scope],
    }
    return ResourceManager(
        resource_client=ResourceManagementClient(credential, profile.subscription_id, **kwargs),
        storage_client=StorageManagementClient(credential, profile.subscription_id, **kwargs),
    )
