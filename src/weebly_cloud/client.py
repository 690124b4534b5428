"""
High-level Weebly Cloud API client

Every operation resolves an entry of the endpoint table, builds the optional
JSON body, signs the request and sends it. Responses are returned unchanged;
callers inspect status and body themselves.
"""

import logging
from typing import Any, Dict, Mapping, Optional, Union

import requests

from .endpoints import Endpoint, get_endpoint
from .http_client import ClientConfig, WeeblyHttpClient
from .options import merge_payload
from .signing import (
    Credentials,
    HmacSigner,
    SignableRequest,
    create_signable_request,
    serialize_body,
)

logger = logging.getLogger(__name__)

Identifier = Union[int, str]


class WeeblyCloudClient:
    """
    Client for the Weebly Cloud API.

    Credentials are fixed at construction and never change; the client can be
    used from several threads.
    """

    def __init__(
        self,
        credentials: Credentials,
        config: Optional[ClientConfig] = None,
        http_client: Optional[WeeblyHttpClient] = None
    ):
        """
        Initialize Weebly Cloud client.

        Args:
            credentials: API public key and secret
            config: Optional connection settings
            http_client: Optional transport, mostly for tests
        """
        self.signer = HmacSigner(credentials)
        self.http_client = http_client or WeeblyHttpClient(config or ClientConfig())

        logger.info(f"Weebly Cloud client initialized for: {self.http_client.config.base_url}")

    @property
    def credentials(self) -> Credentials:
        return self.signer.credentials

    def build_request(
        self,
        operation: str,
        params: Optional[Mapping[str, Any]] = None,
        options: Optional[Mapping[str, Any]] = None
    ) -> SignableRequest:
        """
        Resolve an operation into the request that will be signed and sent.

        Args:
            operation: Operation name from the endpoint table
            params: Path identifiers and required body fields
            options: Optional body fields; blank values are dropped

        Returns:
            SignableRequest: Request with its final path and body
        """
        endpoint = get_endpoint(operation)
        path = endpoint.format_path(params)

        self._warn_unknown_options(endpoint, options)

        body = None
        if endpoint.has_body:
            payload = merge_payload(endpoint.required_fields(params), options, endpoint.optional)
            body = serialize_body(payload)

        return create_signable_request(endpoint.method, path, body)

    def call(
        self,
        operation: str,
        params: Optional[Mapping[str, Any]] = None,
        options: Optional[Mapping[str, Any]] = None
    ) -> requests.Response:
        """
        Perform one API operation.

        Args:
            operation: Operation name from the endpoint table
            params: Path identifiers and required body fields
            options: Optional body fields; blank values are dropped

        Returns:
            requests.Response: Raw server response

        Raises:
            ValidationError: If the operation or a path identifier is unknown
            TransportError: If the request could not be delivered
        """
        request = self.build_request(operation, params, options)
        signature = self.signer.sign_request(request)
        logger.debug(f"Calling {operation}: {request.method.value} {request.path}")
        return self.http_client.send(request, signature)

    def _warn_unknown_options(self, endpoint: Endpoint, options: Optional[Mapping[str, Any]]) -> None:
        if not options:
            return
        unknown = sorted(set(options) - set(endpoint.optional) - set(endpoint.required))
        if unknown:
            logger.warning(f"Ignoring unsupported options for {endpoint.name}: {', '.join(unknown)}")

    def close(self):
        """Close the HTTP client and release connections."""
        self.http_client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    # Account

    def get_account(self) -> requests.Response:
        """Return all data of the Weebly Cloud account."""
        return self.call('get_account')

    def update_account(self, **options) -> requests.Response:
        """
        Update account fields.

        Accepted options: brand_name, brand_url, publish_upsell_url,
        upgrade_url, billing_url.
        """
        return self.call('update_account', options=options)

    # User

    def get_user(self, user_id: Identifier) -> requests.Response:
        return self.call('get_user', {'user_id': user_id})

    def create_user(self, email: str, **options) -> requests.Response:
        """
        Create a user. The email must be unique across all of Weebly.

        Accepted options: test_mode, language. Users created while the
        account is in test mode are flagged as test users.
        """
        return self.call('create_user', {'email': email}, options)

    def update_user(self, user_id: Identifier, **options) -> requests.Response:
        """Update a user. Accepted options: email, test_mode, language."""
        return self.call('update_user', {'user_id': user_id}, options)

    def enable_user(self, user_id: Identifier) -> requests.Response:
        return self.call('enable_user', {'user_id': user_id})

    def disable_user(self, user_id: Identifier) -> requests.Response:
        """Disable a user; login links cannot be created for disabled users."""
        return self.call('disable_user', {'user_id': user_id})

    def get_login_link(self, user_id: Identifier) -> requests.Response:
        """One-time editor link for the most recently modified site of a user."""
        return self.call('get_login_link', {'user_id': user_id})

    # Site

    def get_sites(self, user_id: Identifier) -> requests.Response:
        return self.call('get_sites', {'user_id': user_id})

    def get_site(self, user_id: Identifier, site_id: Identifier) -> requests.Response:
        return self.call('get_site', {'user_id': user_id, 'site_id': site_id})

    def create_site(self, user_id: Identifier, domain: str, site_title: str) -> requests.Response:
        """Create a site. The domain must be unique."""
        return self.call('create_site', {'user_id': user_id, 'domain': domain, 'site_title': site_title})

    def update_site(self, user_id: Identifier, site_id: Identifier, **options) -> requests.Response:
        """
        Update site settings.

        Accepted options: domain, site_title, allow_ssl, brand_name, brand_url,
        upgrade_url, publish_upsell_url, suspended, time_zone, time_format,
        date_format.
        """
        return self.call('update_site', {'user_id': user_id, 'site_id': site_id}, options)

    def publish_site(self, user_id: Identifier, site_id: Identifier) -> requests.Response:
        return self.call('publish_site', {'user_id': user_id, 'site_id': site_id})

    def unpublish_site(self, user_id: Identifier, site_id: Identifier) -> requests.Response:
        return self.call('unpublish_site', {'user_id': user_id, 'site_id': site_id})

    def enable_site(self, user_id: Identifier, site_id: Identifier) -> requests.Response:
        return self.call('enable_site', {'user_id': user_id, 'site_id': site_id})

    def disable_site(self, user_id: Identifier, site_id: Identifier) -> requests.Response:
        """Suspend editor access to a site."""
        return self.call('disable_site', {'user_id': user_id, 'site_id': site_id})

    def get_site_login_link(self, user_id: Identifier, site_id: Identifier) -> requests.Response:
        return self.call('get_site_login_link', {'user_id': user_id, 'site_id': site_id})

    def set_publish_credentials(self, user_id: Identifier, site_id: Identifier, **options) -> requests.Response:
        """
        Publish the site to an external host instead of Weebly hosting.

        Accepted options: publish_host, publish_username, publish_password,
        publish_path.
        """
        return self.call('set_publish_credentials', {'user_id': user_id, 'site_id': site_id}, options)

    def restore_site(self, user_id: Identifier, site_id: Identifier, domain: str) -> requests.Response:
        """Restore a deleted site. Restoring does not publish it."""
        return self.call('restore_site', {'user_id': user_id, 'site_id': site_id, 'domain': domain})

    def delete_site(self, user_id: Identifier, site_id: Identifier) -> requests.Response:
        return self.call('delete_site', {'user_id': user_id, 'site_id': site_id})

    # Plan

    def get_plans(self) -> requests.Response:
        return self.call('get_plans')

    def get_plan(self, plan_id: Identifier) -> requests.Response:
        return self.call('get_plan', {'plan_id': plan_id})

    def get_site_plan(self, user_id: Identifier, site_id: Identifier) -> requests.Response:
        return self.call('get_site_plan', {'user_id': user_id, 'site_id': site_id})

    def set_plan(self, user_id: Identifier, site_id: Identifier, plan_id: Identifier,
                 term: int = 1) -> requests.Response:
        """
        Assign a plan to a site.

        A plan already assigned expires and the new one takes effect
        immediately. term is the billing term in months.
        """
        return self.call('set_plan', {
            'user_id': user_id, 'site_id': site_id, 'plan_id': plan_id, 'term': term
        })

    # Theme

    def get_theme(self, user_id: Identifier) -> requests.Response:
        return self.call('get_theme', {'user_id': user_id})

    def set_theme(self, user_id: Identifier, theme_name: str, theme_zip: str) -> requests.Response:
        """Add a custom theme; theme_zip must be a publicly reachable URL."""
        return self.call('set_theme', {'user_id': user_id, 'theme_name': theme_name, 'theme_zip': theme_zip})

    def set_site_theme(self, user_id: Identifier, site_id: Identifier, theme_id: Identifier,
                       is_custom: bool = True) -> requests.Response:
        """Apply a theme to a site; visible on the published site after the next publish."""
        return self.call('set_site_theme', {
            'user_id': user_id, 'site_id': site_id, 'theme_id': theme_id, 'is_custom': is_custom
        })


def create_client(
    public_key: str,
    secret: str,
    base_url: Optional[str] = None,
    timeout: float = 30.0,
    debug_logging: bool = False
) -> WeeblyCloudClient:
    """
    Create a Weebly Cloud client with default configuration.

    Args:
        public_key: API key
        secret: API secret
        base_url: API root, defaults to the public Weebly Cloud API
        timeout: Request timeout in seconds
        debug_logging: Log redacted request and response summaries

    Returns:
        WeeblyCloudClient: Configured client
    """
    config_kwargs: Dict[str, Any] = {'timeout': timeout, 'debug_logging': debug_logging}
    if base_url:
        config_kwargs['base_url'] = base_url
    return WeeblyCloudClient(Credentials(public_key, secret), ClientConfig(**config_kwargs))
