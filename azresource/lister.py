"""
Subscription-wide listing of every resource, whatever its type.
"""
from azresource import console
from azresource.client import ResourceManager


def list_all(manager: ResourceManager) -> bool:
    """
    Print each resource name and the total count.

    The listing is lazy; an error part-way through keeps what was already
    printed and returns False.
    """
    try:
        console.say("Listing all generic resources: ")
        count = 0
        for res in manager.list_generic_resources():
            count += 1
            console.say(f"Resource: {res.name}")
        console.say(f"Total Resource Count: {count}")
        return True
    except Exception as exc:
        console.report_exception(exc)
    return False
