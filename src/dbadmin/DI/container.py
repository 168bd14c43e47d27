# -*- coding: utf-8 -*-
"""Dependency injection container (dependency-injector)."""

from __future__ import annotations

from functools import partial

from dependency_injector import containers, providers

from dbadmin.config import Settings, get_settings
from dbadmin.controllers.empty_form import EmptyFormController
from dbadmin.controllers.response import ResponseRenderer
from dbadmin.messages.bbcode import BBCodeDecoder
from dbadmin.messages.formatter import MessageFormatter
from dbadmin.messages.icons import SpriteIconResolver
from dbadmin.messages.localization import GettextLocalizer
from dbadmin.templating import JinjaTemplateRenderer
from dbadmin.theme.theme_manager import ThemeManager
from dbadmin.utils.session_cache import SessionCache


def _build_localizer(settings: Settings) -> GettextLocalizer:
    return GettextLocalizer.from_settings(settings.locale)


def _build_decoder(
    settings: Settings,
    icons: SpriteIconResolver,
    localizer: GettextLocalizer,
) -> BBCodeDecoder:
    return BBCodeDecoder(
        docs_base_url=settings.docs.base_url,
        redirect_url=settings.docs.redirect_url,
        allowed_link_prefixes=settings.docs.allowed_link_prefix_list,
        icons=icons,
        translate=localizer.lookup,
    )


def _foreign_key_check_probe(settings: Settings) -> bool:
    return settings.server.foreign_key_checks


class Container(containers.DeclarativeContainer):
    """Application container.

    Wires settings, localization, message formatting, themes, the session
    cache and controllers.
    """

    config = providers.Callable(get_settings)

    localizer = providers.Singleton(_build_localizer, config)

    icon_resolver = providers.Singleton(
        SpriteIconResolver,
        themes_url=config.provided.theme.themes_url,
    )

    markup_decoder = providers.Singleton(_build_decoder, config, icon_resolver, localizer)

    template_renderer = providers.Singleton(JinjaTemplateRenderer)

    message_formatter = providers.Singleton(
        MessageFormatter,
        localizer=localizer,
        decoder=markup_decoder,
        icons=icon_resolver,
        renderer=template_renderer,
    )

    theme_manager = providers.Singleton(ThemeManager, settings=config)

    # Call with session=<the user session mapping>.
    session_cache = providers.Factory(
        SessionCache,
        server=config.provided.server.index,
        user=config.provided.server.user,
    )

    response = providers.Factory(ResponseRenderer)

    empty_form_controller = providers.Factory(
        EmptyFormController,
        response=response,
        template=template_renderer,
        localizer=localizer,
        is_foreign_key_check=providers.Callable(partial, _foreign_key_check_probe, config),
    )
