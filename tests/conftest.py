"""Shared fixtures: the bundled sample resume and a few hand-built resumes."""

from datetime import date

import pytest

from resumekit.contexts.templating.resume_data_structure import (
    Experience,
    PersonalInfo,
    ResumeData,
    sample_resume,
)
from resumekit.contexts.templating.template_registry import get_registry


@pytest.fixture(scope="session")
def sample_data() -> ResumeData:
    return sample_resume()


@pytest.fixture(scope="session")
def registry():
    return get_registry()


@pytest.fixture
def experience_only() -> ResumeData:
    """A resume with a name and one current job, nothing else."""
    return ResumeData(
        personal_info=PersonalInfo(first_name="Ada", last_name="Lovelace"),
        experience=(
            Experience(
                title="Analyst",
                company_name="Analytical Engines Ltd",
                start_date=date(2020, 1, 1),
                end_date=date(2020, 6, 1),
                is_current=True,
            ),
        ),
    )
