"""
Console rendering of deployment results.

Rendering functions return lines so they can be checked without capturing output;
the print_* functions write them to the standard streams.
"""

import sys
from typing import List

from deployment.constants import (
    BASE_SEPOLIA,
    DOMAIN_IDS,
    DOMAIN_LABELS,
    NETWORK_ROLES,
    NEXT_STEPS,
    SEPOLIA,
)
from deployment.types import DeploymentResult

ROLE_BANNERS = {
    BASE_SEPOLIA: "BASE SEPOLIA FIXED CONTRACT DEPLOYED",
    SEPOLIA: "ETHEREUM SEPOLIA FIXED CONTRACT DEPLOYED",
}


def render_start(network_name: str, contract_name: str) -> List[str]:
    return [
        f"🌟 Deploying {contract_name} (Fixed Version)...",
        f"Network: {network_name}",
    ]


def render_role(network_name: str, deployed_address: str) -> List[str]:
    """Network specific banner; networks without a role get none."""
    banner = ROLE_BANNERS.get(network_name)
    role = NETWORK_ROLES.get(network_name)
    if not banner or not role:
        return []
    return [
        f"\n🌟 {banner}",
        f"💫 This is your new {role} contract",
        f"📍 Contract Address: {deployed_address}",
    ]


def render_guidance() -> List[str]:
    lines = ["\n💡 Domain IDs for cross-chain messaging:"]
    for network_name, domain_id in DOMAIN_IDS.items():
        lines.append(f"{DOMAIN_LABELS[network_name]} Domain: {domain_id}")

    lines.append("\n🔧 Next steps:")
    for number, step in enumerate(NEXT_STEPS, start=1):
        lines.append(f"{number}. {step}")

    lines.append("\n📝 Remember to save this address for cross-chain setup!")
    return lines


def render_mailbox(mailbox_address: str) -> str:
    return f"Using Mailbox: {mailbox_address}"


def render_result(result: DeploymentResult) -> List[str]:
    if not result.succeeded:
        return []

    lines = [
        f"✅ {result.contract_name} (Fixed) deployed to: {result.deployed_address}",
        f"🔗 Mailbox: {result.mailbox_address}",
        f"🌐 Network: {result.network_name}",
    ]
    lines.extend(render_role(result.network_name, result.deployed_address))
    lines.extend(render_guidance())
    return lines


def render_error(error_detail: str) -> str:
    return f"❌ Deployment failed: {error_detail}"


def exit_code(result: DeploymentResult) -> int:
    return 0 if result.succeeded else 1


def print_start(network_name: str, contract_name: str) -> None:
    print(*render_start(network_name, contract_name), sep="\n")


def print_mailbox(mailbox_address: str) -> None:
    print(render_mailbox(mailbox_address))


def print_error(error_detail: str) -> None:
    print(render_error(error_detail), file=sys.stderr)


def print_result(result: DeploymentResult) -> None:
    if result.succeeded:
        print(*render_result(result), sep="\n")
    else:
        print_error(result.error_detail)
