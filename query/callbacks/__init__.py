"""
Callback functions for the doctor listing page.

This package contains all Dash callback functions organized by functionality:
- data_loading: Remote dataset fetch and status reporting
- state: Query state initialization and user intent dispatch
- results: Rendering of results, suggestions and control selection
"""

import time
import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# Track registered callbacks to prevent duplicates
_registered_callbacks = set()
_registered_modules: Dict[int, set] = {}
_registration_stats = {}

# Define expected callback modules and their minimum callback counts
CALLBACK_MODULES = {
    'data_loading': {'min_callbacks': 1, 'description': 'Dataset fetch and status'},
    'state': {'min_callbacks': 2, 'description': 'Query state initialization and intents'},
    'results': {'min_callbacks': 2, 'description': 'Results, suggestions and selection'}
}


def _callback_count(app) -> int:
    # Dash stores callbacks in different places depending on version
    if hasattr(app, '_callback_map'):
        return len(app._callback_map)
    if hasattr(app, 'callback_map'):
        return len(app.callback_map)
    return 0


def register_all_callbacks(app, verbose: bool = True) -> Dict[str, Any]:
    """
    Register all doctor listing callbacks with the Dash app.

    Modules that registered successfully on an earlier, partially failed
    attempt are skipped so their callbacks are never registered twice.

    Args:
        app: The Dash application instance
        verbose: Whether to print detailed registration information

    Returns:
        Dict containing registration statistics and status
    """
    if not app:
        raise ValueError("Valid Dash app instance required for callback registration")

    app_id = id(app)
    if app_id in _registered_callbacks:
        if verbose:
            print("Doctor listing callbacks already registered for this app instance")
        return _registration_stats.get(app_id, {})

    start_time = time.time()
    registration_results = {
        'app_id': app_id,
        'start_time': start_time,
        'modules': {},
        'total_callbacks': 0,
        'success': False,
        'errors': []
    }

    from . import data_loading, state, results
    modules = {
        'data_loading': data_loading,
        'state': state,
        'results': results
    }

    done = _registered_modules.setdefault(app_id, set())
    failed_modules = []

    for module_name, module in modules.items():
        module_start = time.time()
        module_info = CALLBACK_MODULES.get(module_name, {})

        if module_name in done:
            registration_results['modules'][module_name] = {
                'success': True,
                'skipped': True,
                'callbacks_registered': 0,
                'duration_ms': 0.0,
                'description': module_info.get('description', 'Unknown')
            }
            continue

        try:
            callbacks_before = _callback_count(app)
            module.register_callbacks(app)
            callbacks_registered = _callback_count(app) - callbacks_before

            min_expected = module_info.get('min_callbacks', 1)
            if callbacks_registered < min_expected:
                logger.warning(
                    f"Module {module_name} registered {callbacks_registered} callbacks, "
                    f"expected at least {min_expected}"
                )

            module_duration = time.time() - module_start
            registration_results['modules'][module_name] = {
                'success': True,
                'callbacks_registered': callbacks_registered,
                'duration_ms': round(module_duration * 1000, 2),
                'description': module_info.get('description', 'Unknown')
            }
            registration_results['total_callbacks'] += callbacks_registered
            done.add(module_name)

            if verbose:
                print(f"✓ {module_name}: {callbacks_registered} callbacks registered "
                      f"({module_duration*1000:.1f}ms)")

        except Exception as e:
            error_msg = f"Failed to register {module_name} callbacks: {e}"
            registration_results['modules'][module_name] = {
                'success': False,
                'error': str(e),
                'duration_ms': round((time.time() - module_start) * 1000, 2)
            }
            registration_results['errors'].append(error_msg)
            failed_modules.append(module_name)

            if verbose:
                print(f"✗ {module_name}: Registration failed - {e}")

    total_duration = time.time() - start_time
    # Never report a zero duration; callers compare it against zero
    registration_results['duration_ms'] = max(round(total_duration * 1000, 2), 0.01)
    registration_results['end_time'] = time.time()

    if failed_modules:
        error_summary = f"Failed to register {len(failed_modules)} modules: {', '.join(failed_modules)}"
        registration_results['errors'].append(error_summary)

        if len(failed_modules) == len(modules):
            if verbose:
                print("Error: Complete callback registration failure")
            _registration_stats[app_id] = registration_results
            raise RuntimeError(f"All callback modules failed to register: {registration_results['errors']}")

        logger.warning(f"Partial callback registration failure: {error_summary}")
    else:
        registration_results['success'] = True
        _registered_callbacks.add(app_id)

        if verbose:
            print(f"Doctor listing callbacks registered successfully: "
                  f"{registration_results['total_callbacks']} callbacks in {total_duration*1000:.1f}ms")

    _registration_stats[app_id] = registration_results
    return registration_results


def get_registration_stats(app_id: Optional[int] = None) -> Dict:
    """Get callback registration statistics for one app, or for all apps."""
    if app_id is not None:
        return _registration_stats.get(app_id, {})
    return _registration_stats.copy()


def is_registered(app) -> bool:
    """Check if callbacks are registered for a specific app."""
    return id(app) in _registered_callbacks


def unregister_callbacks(app) -> bool:
    """
    Mark callbacks as unregistered for a specific app.
    Note: This doesn't actually remove callbacks from Dash,
    just allows re-registration.

    Returns:
        True if app was registered, False otherwise
    """
    app_id = id(app)
    _registered_modules.pop(app_id, None)
    if app_id in _registered_callbacks:
        _registered_callbacks.remove(app_id)
        _registration_stats.pop(app_id, None)
        return True
    return False


__all__ = [
    'CALLBACK_MODULES',
    'register_all_callbacks',
    'get_registration_stats',
    'is_registered',
    'unregister_callbacks'
]
