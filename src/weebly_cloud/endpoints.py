"""
Weebly Cloud API endpoint table

Each operation is described by data rather than code: the HTTP method, the
path template, the fields that are always sent and the optional fields that
are sent only when not blank.
"""

from dataclasses import dataclass, field
from string import Formatter
from typing import Any, Dict, Mapping, Optional, Tuple

from .exceptions import ValidationError
from .signing.types import HttpMethod

SITE_SETTINGS_FIELDS = (
    'domain',
    'site_title',
    'allow_ssl',
    'brand_name',
    'brand_url',
    'upgrade_url',
    'publish_upsell_url',
    'suspended',
    'time_zone',
    'time_format',
    'date_format',
)

PUBLISH_CREDENTIAL_FIELDS = (
    'publish_host',
    'publish_username',
    'publish_password',
    'publish_path',
)


@dataclass(frozen=True)
class Endpoint:
    """
    A single API operation

    Attributes:
        name: Operation name, also the client method name
        method: HTTP method
        path: Path template with {user_id}, {site_id} or {plan_id} fields
        required: Body fields always sent, in payload order
        optional: Body fields sent only when not blank, in payload order
        defaults: Values used for required fields the caller omits
        summary: One-line description
    """
    name: str
    method: HttpMethod
    path: str
    required: Tuple[str, ...] = ()
    optional: Tuple[str, ...] = ()
    defaults: Dict[str, Any] = field(default_factory=dict)
    summary: str = ''

    @property
    def has_body(self) -> bool:
        return bool(self.required or self.optional)

    @property
    def path_params(self) -> Tuple[str, ...]:
        return tuple(
            name for _, name, _, _ in Formatter().parse(self.path) if name
        )

    def format_path(self, params: Optional[Mapping[str, Any]] = None) -> str:
        """
        Interpolate identifiers into the path template.

        Identifiers are substituted as-is, without URL escaping.

        Raises:
            ValidationError: If an identifier is missing
        """
        params = params or {}
        missing = [name for name in self.path_params if params.get(name) is None]
        if missing:
            raise ValidationError(
                f"Missing path parameters for {self.name}: {', '.join(missing)}",
                details={'operation': self.name, 'missing': missing}
            )
        return self.path.format(**{name: params[name] for name in self.path_params})

    def required_fields(self, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """
        Collect required body fields from params, applying defaults.

        Raises:
            ValidationError: If a required field without default is absent
        """
        params = params or {}
        values = {}
        for name in self.required:
            if name in params:
                values[name] = params[name]
            elif name in self.defaults:
                values[name] = self.defaults[name]
            else:
                raise ValidationError(
                    f"Missing required field for {self.name}: {name}",
                    details={'operation': self.name, 'field': name}
                )
        return values


_ENDPOINT_LIST = (
    # Account
    Endpoint('get_account', HttpMethod.GET, 'account',
             summary='Return the Weebly Cloud account'),
    Endpoint('update_account', HttpMethod.PATCH, 'account',
             optional=('brand_name', 'brand_url', 'publish_upsell_url', 'upgrade_url', 'billing_url'),
             summary='Update account branding and URLs'),

    # User
    Endpoint('get_user', HttpMethod.GET, 'user/{user_id}',
             summary='Return a user'),
    Endpoint('create_user', HttpMethod.POST, 'user',
             required=('email',), optional=('test_mode', 'language'),
             summary='Create a user; the email must be unique across Weebly'),
    Endpoint('update_user', HttpMethod.PATCH, 'user/{user_id}',
             optional=('email', 'test_mode', 'language'),
             summary='Update a user'),
    Endpoint('enable_user', HttpMethod.POST, 'user/{user_id}/enable',
             summary='Allow a disabled user to log into the editor again'),
    Endpoint('disable_user', HttpMethod.POST, 'user/{user_id}/disable',
             summary='Prevent a user from logging into the editor'),
    Endpoint('get_login_link', HttpMethod.POST, 'user/{user_id}/loginLink',
             summary='One-time editor link for the last modified site'),

    # Site
    Endpoint('get_sites', HttpMethod.GET, 'user/{user_id}/site',
             summary='List the sites of a user'),
    Endpoint('get_site', HttpMethod.GET, 'user/{user_id}/site/{site_id}',
             summary='Return a site'),
    Endpoint('create_site', HttpMethod.POST, 'user/{user_id}/site',
             required=('domain', 'site_title'),
             summary='Create a site; the domain must be unique'),
    Endpoint('update_site', HttpMethod.PATCH, 'user/{user_id}/site/{site_id}',
             optional=SITE_SETTINGS_FIELDS,
             summary='Update site settings'),
    Endpoint('publish_site', HttpMethod.POST, 'user/{user_id}/site/{site_id}/publish',
             summary='Publish a site'),
    Endpoint('unpublish_site', HttpMethod.POST, 'user/{user_id}/site/{site_id}/unpublish',
             summary='Unpublish a site'),
    Endpoint('enable_site', HttpMethod.POST, 'user/{user_id}/site/{site_id}/enable',
             summary='Re-enable a suspended site'),
    Endpoint('disable_site', HttpMethod.POST, 'user/{user_id}/site/{site_id}/disable',
             summary='Suspend editor access to a site'),
    Endpoint('get_site_login_link', HttpMethod.POST, 'user/{user_id}/site/{site_id}/loginLink',
             summary='One-time editor link for a site'),
    Endpoint('set_publish_credentials', HttpMethod.PATCH, 'user/{user_id}/site/{site_id}',
             optional=PUBLISH_CREDENTIAL_FIELDS,
             summary='Publish the site to an external host'),
    Endpoint('restore_site', HttpMethod.POST, 'user/{user_id}/site/{site_id}/restore',
             required=('domain',),
             summary='Restore a deleted site'),
    Endpoint('delete_site', HttpMethod.DELETE, 'user/{user_id}/site/{site_id}',
             summary='Delete a site'),

    # Plan
    Endpoint('get_plans', HttpMethod.GET, 'plan',
             summary='List the plans available to the account'),
    Endpoint('get_plan', HttpMethod.GET, 'plan/{plan_id}',
             summary='Return a plan'),
    Endpoint('get_site_plan', HttpMethod.GET, 'user/{user_id}/site/{site_id}/plan',
             summary='Return the plan assigned to a site'),
    Endpoint('set_plan', HttpMethod.POST, 'user/{user_id}/site/{site_id}/plan',
             required=('plan_id', 'term'), defaults={'term': 1},
             summary='Assign a plan to a site; term is in months'),

    # Theme
    Endpoint('get_theme', HttpMethod.GET, 'user/{user_id}/theme',
             summary='List the themes available to a user'),
    Endpoint('set_theme', HttpMethod.POST, 'user/{user_id}/theme',
             required=('theme_name', 'theme_zip'),
             summary='Add a custom theme from a public zip URL'),
    Endpoint('set_site_theme', HttpMethod.POST, 'user/{user_id}/site/{site_id}/theme',
             required=('theme_id', 'is_custom'), defaults={'is_custom': True},
             summary='Apply a theme to a site'),
)

ENDPOINTS: Dict[str, Endpoint] = {endpoint.name: endpoint for endpoint in _ENDPOINT_LIST}


def get_endpoint(operation: str) -> Endpoint:
    """
    Look up an operation by name.

    Raises:
        ValidationError: If the operation is unknown
    """
    try:
        return ENDPOINTS[operation]
    except KeyError:
        raise ValidationError(
            f"Unknown operation: {operation}",
            details={'operation': operation, 'known': sorted(ENDPOINTS)}
        )
