import flet as ft


class AppTheme:
    """
    Centralized theme configuration.
    Neutral editorial palette with an amber accent for premium markers.
    """

    font_family = "Inter"

    # Colors - Light
    primary_light = "#1f2937"
    on_primary_light = "#ffffff"
    secondary_light = "#d97706"  # premium amber
    surface_light = "#ffffff"
    error_light = "#dc2626"

    # Colors - Dark
    primary_dark = "#e5e7eb"
    on_primary_dark = "#111827"
    secondary_dark = "#f59e0b"
    surface_dark = "#1f2937"

    premium = "#f59e0b"
    success = "#16a34a"

    @classmethod
    def light_theme(cls) -> ft.Theme:
        return ft.Theme(
            color_scheme=ft.ColorScheme(
                primary=cls.primary_light,
                on_primary=cls.on_primary_light,
                secondary=cls.secondary_light,
                surface=cls.surface_light,
                error=cls.error_light,
            ),
            font_family=cls.font_family,
            use_material3=True,
        )

    @classmethod
    def dark_theme(cls) -> ft.Theme:
        return ft.Theme(
            color_scheme=ft.ColorScheme(
                primary=cls.primary_dark,
                on_primary=cls.on_primary_dark,
                secondary=cls.secondary_dark,
                surface=cls.surface_dark,
                error=cls.error_light,
            ),
            font_family=cls.font_family,
            use_material3=True,
        )
