"""
Styling constants for the doctor listing UI.

This module contains centralized styling definitions to ensure consistent
appearance across the search box, filter panel and result cards.
"""

# Color scheme
COLORS = {
    'muted': '#787887',
    'border': '#e0e0e0',
    'video_consult': '#28a745',
    'in_clinic': '#6c757d'
}

# Common spacing values
SPACING = {
    'sm': '10px',
    'md': '20px',
    'lg': '30px'
}

# Component-specific styles
STYLES = {
    'search_container': {
        'position': 'relative',
        'maxWidth': '600px',
        'margin': f"0 auto {SPACING['md']} auto"
    },

    'suggestions_list': {
        'position': 'absolute',
        'top': '100%',
        'left': 0,
        'right': 0,
        'zIndex': 1000
    },

    'filter_panel': {
        'position': 'sticky',
        'top': SPACING['md']
    },

    'filter_section': {
        'marginBottom': SPACING['md']
    },

    'specialty_options': {
        'maxHeight': '320px',
        'overflowY': 'auto'
    },

    'doctor_image': {
        'width': '100px',
        'height': '100px',
        'objectFit': 'cover',
        'borderRadius': '50%'
    },

    'doctor_card': {
        'marginBottom': SPACING['sm'],
        'borderColor': COLORS['border']
    },

    'no_results': {
        'textAlign': 'center',
        'padding': SPACING['lg'],
        'color': COLORS['muted']
    },

    'hidden': {
        'display': 'none'
    }
}

# Bootstrap classes commonly used
CLASSES = {
    'text_muted': "card-text text-muted",
    'full_width': "w-100",
    'margin_top': "mt-2",
    'filter_header': "h6 text-uppercase text-muted"
}

# Icon mappings
ICONS = {
    'search': "bi bi-search me-2",
    'video': "bi bi-camera-video me-1",
    'clinic': "bi bi-hospital me-1",
    'warning': "bi bi-exclamation-triangle me-2"
}
