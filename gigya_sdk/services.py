"""Per-domain method sets forwarding into :class:`GigyaClient`.

Each service class lists the remote API methods it exposes.  Python method
names are the snake_case form of the API name, e.g.
``Socialize.get_user_info`` calls ``socialize.getUserInfo``.
"""
from __future__ import annotations

from typing import Any, Callable, ClassVar, Mapping, Optional

from .client import Callback, GigyaClient

ApiMethod = Callable[..., Any]


def api_method(name: str) -> ApiMethod:
    """Return a service method forwarding to the API method ``name``."""

    def call(
        self: "Service",
        params: Optional[Mapping[str, Any]] = None,
        callback: Optional[Callback] = None,
        **overrides: Any,
    ) -> Any:
        return self.call(name, params, callback, **overrides)

    call.__name__ = name
    call.__doc__ = f"Call ``{name}`` on this service."
    return call


class Service:
    service: ClassVar[str]

    def __init__(self, client: GigyaClient) -> None:
        self.client = client

    def call(
        self,
        method: str,
        params: Optional[Mapping[str, Any]] = None,
        callback: Optional[Callback] = None,
        **overrides: Any,
    ) -> Any:
        return self.client.request(
            method, params, callback, **{**overrides, "service": self.service}
        )

    def call_async(
        self, method: str, params: Optional[Mapping[str, Any]] = None, **overrides: Any
    ):
        return self.client.request_async(
            method, params, **{**overrides, "service": self.service}
        )


class Socialize(Service):
    service = "socialize"

    check_in = api_method("checkin")
    delete_account = api_method("deleteAccount")
    del_user_settings = api_method("delUserSettings")
    export_users = api_method("exportUsers")
    facebook_graph_operation = api_method("facebookGraphOperation")
    get_albums = api_method("getAlbums")
    get_contacts = api_method("getContacts")
    get_feed = api_method("getFeed")
    get_friends_info = api_method("getFriendsInfo")
    get_photos = api_method("getPhotos")
    get_places = api_method("getPlaces")
    get_raw_data = api_method("getRawData")
    get_session_info = api_method("getSessionInfo")
    get_top_shares = api_method("getTopShares")
    get_user_info = api_method("getUserInfo")
    get_user_settings = api_method("getUserSettings")
    login = api_method("login")
    logout = api_method("logout")
    notify_login = api_method("notifyLogin")
    notify_registration = api_method("notifyRegistration")
    publish_user_action = api_method("publishUserAction")
    remove_connection = api_method("removeConnection")
    send_notification = api_method("sendNotification")
    set_status = api_method("setStatus")
    set_uid = api_method("setUID")
    set_user_info = api_method("setUserInfo")
    set_user_settings = api_method("setUserSettings")
    shorten_url = api_method("shortenURL")


class Accounts(Service):
    service = "accounts"

    delete_account = api_method("deleteAccount")
    delete_screen_set = api_method("deleteScreenSet")
    finalize_registration = api_method("finalizeRegistration")
    get_account_info = api_method("getAccountInfo")
    get_conflicting_account = api_method("getConflictingAccount")
    get_jwt = api_method("getJWT")
    get_jwt_public_key = api_method("getJWTPublicKey")
    get_policies = api_method("getPolicies")
    get_schema = api_method("getSchema")
    get_screen_sets = api_method("getScreenSets")
    import_profile_photo = api_method("importProfilePhoto")
    init_registration = api_method("initRegistration")
    is_available_login_id = api_method("isAvailableLoginID")
    link_accounts = api_method("linkAccounts")
    login = api_method("login")
    logout = api_method("logout")
    notify_login = api_method("notifyLogin")
    publish_profile_photo = api_method("publishProfilePhoto")
    register = api_method("register")
    resend_verification_code = api_method("resendVerificationCode")
    reset_password = api_method("resetPassword")
    search = api_method("search")
    set_account_info = api_method("setAccountInfo")
    set_policies = api_method("setPolicies")
    set_schema = api_method("setSchema")
    set_screen_set = api_method("setScreenSet")
    upload_profile_photo = api_method("uploadProfilePhoto")


class Comments(Service):
    service = "comments"

    delete_comment = api_method("deleteComment")
    flag_comment = api_method("flagComment")
    get_category_info = api_method("getCategoryInfo")
    get_comments = api_method("getComments")
    get_stream_info = api_method("getStreamInfo")
    get_top_streams = api_method("getTopStreams")
    get_user_comments = api_method("getUserComments")
    highlight_comment = api_method("highlightComment")
    post_comment = api_method("postComment")
    set_category_info = api_method("setCategoryInfo")
    set_stream_info = api_method("setStreamInfo")
    subscribe = api_method("subscribe")
    unsubscribe = api_method("unsubscribe")
    update_comment = api_method("updateComment")
    vote = api_method("vote")


class GM(Service):
    """Game mechanics."""

    service = "gm"

    delete_action = api_method("deleteAction")
    delete_challenge = api_method("deleteChallenge")
    delete_challenge_variants = api_method("deleteChallengeVariants")
    get_action_config = api_method("getActionConfig")
    get_action_log = api_method("getActionLog")
    get_challenge_config = api_method("getChallengeConfig")
    get_challenge_status = api_method("getChallengeStatus")
    get_challenge_variants = api_method("getChallengeVariants")
    get_global_config = api_method("getGlobalConfig")
    get_top_users = api_method("getTopUsers")
    notify_action = api_method("notifyAction")
    redeem_points = api_method("redeemPoints")
    reset_level_status = api_method("resetLevelStatus")
    set_action_config = api_method("setActionConfig")
    set_challenge_config = api_method("setChallengeConfig")
    set_global_config = api_method("setGlobalConfig")


class DS(Service):
    """Data store."""

    service = "ds"

    delete = api_method("delete")
    get = api_method("get")
    get_schema = api_method("getSchema")
    search = api_method("search")
    set_schema = api_method("setSchema")
    store = api_method("store")


class IDS(Service):
    """Identity storage."""

    service = "ids"

    delete_account = api_method("deleteAccount")
    get_account_info = api_method("getAccountInfo")
    get_counters = api_method("getCounters")
    get_schema = api_method("getSchema")
    increment_counters = api_method("incrementCounters")
    register_counters = api_method("registerCounters")
    search = api_method("search")
    set_account_info = api_method("setAccountInfo")
    set_schema = api_method("setSchema")


class Reports(Service):
    service = "reports"

    get_accounts_stats = api_method("getAccountsStats")
    get_chat_stats = api_method("getChatStats")
    get_comments_stats = api_method("getCommentsStats")
    get_feed_stats = api_method("getFeedStats")
    get_gm_redeemable_points = api_method("getGMRedeemablePoints")
    get_gm_stats = api_method("getGMStats")
    get_gm_top_users = api_method("getGMTopUsers")
    get_irank = api_method("getIRank")
    get_reactions_stats = api_method("getReactionsStats")
    get_socialize_stats = api_method("getSocializeStats")


ALL_SERVICES = (Socialize, Accounts, Comments, GM, DS, IDS, Reports)
