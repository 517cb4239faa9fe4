"""
Copyright 2024, Zep Software, Inc.

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

from pydantic import BaseModel, ConfigDict, Field


class HostConfig(BaseModel):
    """Host-side behaviour when aggregating contributor answers."""

    model_config = ConfigDict(frozen=True)

    strict: bool = Field(
        default=False,
        description='Propagate contributor failures as ContributorFailedError instead of answering false',
    )
    log_contributor_failures: bool = Field(
        default=True,
        description='Log the traceback of a contributor that raises while being queried',
    )


DEFAULT_HOST_CONFIG = HostConfig()
