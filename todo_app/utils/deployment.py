"""
Deployment Banner

FLOW OVERVIEW
- DeploymentInfo.from_config(config)
  • Collect the display-only GitHub/Neon identifiers from app config.
- is_preview
  • A pull request number is only present on preview deployments.
- code_location / pull_request_url / onboarding_action
  • Derived strings rendered by the index template.

Nothing here affects how to-dos are stored.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class DeploymentInfo:
    """Where this instance was deployed from"""
    page_title: str
    repository: Optional[str] = None
    ref: Optional[str] = None
    pull_number: Optional[str] = None
    neon_branch: Optional[str] = None
    onboarding_origin: Optional[str] = None
    onboarding_id: Optional[str] = None

    @classmethod
    def from_config(cls, config) -> 'DeploymentInfo':
        return cls(
            page_title=config.get('PAGE_TITLE') or 'Neon Todos',
            repository=config.get('GITHUB_REPOSITORY'),
            ref=config.get('GITHUB_REF'),
            pull_number=config.get('GITHUB_PULL_NUMBER'),
            neon_branch=config.get('NEON_BRANCH'),
            onboarding_origin=config.get('NEON_ONBOARDING_ORIGIN'),
            onboarding_id=config.get('NEON_ONBOARDING_ID'),
        )

    @property
    def is_preview(self) -> bool:
        return bool(self.pull_number)

    @property
    def code_location(self) -> Optional[str]:
        """github.com path of the deployed code, without scheme"""
        if not self.repository:
            return None
        if self.is_preview:
            return f'github.com/{self.repository}/tree/{self.ref}'
        return f'github.com/{self.repository}'

    @property
    def pull_request_url(self) -> Optional[str]:
        if not (self.is_preview and self.repository):
            return None
        return f'https://github.com/{self.repository}/pull/{self.pull_number}'

    @property
    def onboarding_url(self) -> Optional[str]:
        """Form target that opens or merges the title-change pull request"""
        if not (self.onboarding_origin and self.onboarding_id):
            return None
        return f'{self.onboarding_origin.rstrip("/")}/onboarding/{self.onboarding_id}/pulls'

    @property
    def onboarding_action(self) -> str:
        return 'merge' if self.is_preview else 'open'
