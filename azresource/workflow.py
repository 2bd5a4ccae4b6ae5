"""
Scripted provisioning workflow.

Creates a resource group, creates/updates/lists/deletes storage accounts in it
and always targets the group for deletion on the way out.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from azure.core.exceptions import ResourceNotFoundError

from azresource import console
from azresource.client import ResourceManager
from azresource.config import DEFAULT_REGION
from azresource.models.result import StepResult, StepStatus, WorkflowReport
from azresource.naming import random_resource_name

NAME_LENGTH = 24

GENERATE_NAMES = "generate names"
CREATE_GROUP = "create resource group"
CREATE_ACCOUNT = "create storage account"
UPDATE_ACCOUNT = "update storage account"
CREATE_SECOND_ACCOUNT = "create second storage account"
LIST_ACCOUNTS = "list storage accounts"
DELETE_ACCOUNT = "delete storage account"
CLEANUP = "delete resource group"

STEPS = [
    GENERATE_NAMES,
    CREATE_GROUP,
    CREATE_ACCOUNT,
    UPDATE_ACCOUNT,
    CREATE_SECOND_ACCOUNT,
    LIST_ACCOUNTS,
    DELETE_ACCOUNT,
]

_NOTHING_TO_CLEAN = "Did not create any resources in Azure. No clean up is necessary"


@dataclass(frozen=True)
class WorkflowOptions:
    region: str = DEFAULT_REGION
    group_prefix: str = "rgRSMR"
    resource_prefixes: Tuple[str, str] = ("rn1", "rn2")
    initial_sku: str = "Standard_LRS"
    updated_sku: str = "Standard_RAGRS"
    # False keeps the original fire-and-forget behavior for the group delete.
    wait_for_group_delete: bool = False


def _cleanup(manager: ResourceManager, group_name: Optional[str], wait: bool) -> StepResult:
    if group_name is None:
        console.say(_NOTHING_TO_CLEAN)
        return StepResult(CLEANUP, StepStatus.NOOP, "no resource group name was assigned")

    try:
        console.say(f"Deleting Resource Group: {group_name}")
        manager.begin_delete_resource_group(group_name, wait=wait)
        if wait:
            console.say(f"Deleted Resource Group: {group_name}")
        else:
            console.say(f"Requested deletion of Resource Group: {group_name}")
        return StepResult(CLEANUP, StepStatus.SUCCEEDED, group_name)
    except ResourceNotFoundError:
        console.say(_NOTHING_TO_CLEAN)
        return StepResult(CLEANUP, StepStatus.NOOP, f"resource group '{group_name}' does not exist")
    except Exception as exc:
        console.report_exception(exc)
        return StepResult(CLEANUP, StepStatus.FAILED, str(exc), exc)


def execute(manager: ResourceManager, options: Optional[WorkflowOptions] = None) -> WorkflowReport:
    """
    Run every main step in order, stopping at the first failure, then clean up.

    Cleanup runs exactly once whatever happened before it, and its outcome is
    recorded separately so it never changes ``report.succeeded``.
    """
    opts = options or WorkflowOptions()
    report = WorkflowReport(group_name=None, expected_steps=list(STEPS))

    def done(step: str, detail: str = "") -> None:
        report.steps.append(StepResult(step, StepStatus.SUCCEEDED, detail))

    current = GENERATE_NAMES
    try:
        group_name = random_resource_name(opts.group_prefix, NAME_LENGTH)
        name1 = random_resource_name(opts.resource_prefixes[0], NAME_LENGTH)
        name2 = random_resource_name(opts.resource_prefixes[1], NAME_LENGTH)
        report.group_name = group_name
        done(current, group_name)

        # 1. Resource group
        current = CREATE_GROUP
        console.say(f"Creating a resource group with name: {group_name}")
        manager.create_resource_group(group_name, opts.region)
        done(current, group_name)

        # 2. First storage account
        current = CREATE_ACCOUNT
        console.say(f"Creating a storage account with name: {name1}")
        account1 = manager.create_storage_account(name1, opts.region, group_name, opts.initial_sku)
        console.say(f"Storage account created: {account1.id}")
        done(current, account1.id)

        # 3. Replace its SKU
        current = UPDATE_ACCOUNT
        console.say(f"Updating the storage account with name: {name1}")
        account1 = manager.update_storage_account_sku(account1, opts.updated_sku)
        console.say(f"Updated the storage account with name: {name1}")
        done(current, account1.sku)

        # 4. Second storage account
        current = CREATE_SECOND_ACCOUNT
        console.say(f"Creating another storage account with name: {name2}")
        account2 = manager.create_storage_account(name2, opts.region, group_name, opts.initial_sku)
        console.say(f"Storage account created: {account2.id}")
        done(current, account2.id)

        # 5. List what the group holds; order is whatever the API returns
        current = LIST_ACCOUNTS
        console.say(f"Listing all storage accounts for resource group: {group_name}")
        listed = []
        for account in manager.list_storage_accounts(group_name):
            listed.append(account.name)
            console.say(f"Storage account: {account.name}")
        done(current, ", ".join(listed))

        # 6. Delete the second account
        current = DELETE_ACCOUNT
        console.say(f"Deleting storage account: {name2}")
        manager.delete_storage_account_by_id(account2.id)
        console.say(f"Deleted storage account: {name2}")
        done(current, account2.id)
    except Exception as exc:
        console.report_exception(exc)
        report.steps.append(StepResult(current, StepStatus.FAILED, str(exc), exc))
        for step in STEPS[len(report.steps):]:
            report.steps.append(StepResult(step, StepStatus.SKIPPED))
    finally:
        report.cleanup = _cleanup(manager, report.group_name, opts.wait_for_group_delete)

    return report


def run(manager: ResourceManager, options: Optional[WorkflowOptions] = None) -> bool:
    return execute(manager, options).succeeded
