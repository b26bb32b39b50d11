# -*- coding: utf-8 -*-

import traceback

from pyrevit import DB
from pyrevit import forms
from pyrevit import revit
from pyrevit import script


def get_output():
    return script.get_output()


def get_logger():
    return script.get_logger()


def _safe_log(logger_method, msg):
    try:
        logger_method(msg)
    except UnicodeEncodeError:
        try:
            # Fallback to repr which escapes non-ascii
            logger_method(repr(msg))
        except Exception:
            logger_method("<Log message encoding failed>")
    except Exception:
        pass


def alert(msg, title='Hole Tools', warn_icon=True):
    try:
        forms.alert(msg, title=title, warn_icon=warn_icon)
    except Exception:
        # As a last resort if UI is unavailable
        _safe_log(get_logger().warning, msg)


def log_exception(prefix='Error'):
    logger = get_logger()
    _safe_log(logger.error, prefix)
    _safe_log(logger.error, traceback.format_exc())


def ensure_symbol_active(doc, family_symbol):
    """Activate a FamilySymbol before placement. Must run inside a transaction."""
    if family_symbol is None:
        return False
    if family_symbol.IsActive:
        return False
    family_symbol.Activate()
    doc.Regenerate()
    return True


def get_param(elem, name):
    if elem is None or not name:
        return None
    try:
        return elem.LookupParameter(name)
    except Exception:
        return None


def set_string_param(elem, param_name, value):
    p = get_param(elem, param_name)
    if p is None:
        return False
    try:
        if p.IsReadOnly:
            return False
        p.Set(str(value) if value is not None else '')
        return True
    except Exception:
        return False


def set_comments(elem, value):
    if elem is None:
        return False

    # Prefer built-in parameter if available
    try:
        p = elem.get_Parameter(DB.BuiltInParameter.ALL_MODEL_INSTANCE_COMMENTS)
        if p and (not p.IsReadOnly):
            p.Set(str(value) if value is not None else '')
            return True
    except Exception:
        pass

    # Fallback by name
    if set_string_param(elem, 'Comments', value):
        return True
    return set_string_param(elem, u'Комментарии', value)


def get_comments(elem):
    if elem is None:
        return u''
    try:
        p = elem.get_Parameter(DB.BuiltInParameter.ALL_MODEL_INSTANCE_COMMENTS)
        if p:
            return p.AsString() or u''
    except Exception:
        pass
    return u''


def _rollback(t):
    rb = getattr(t, 'Rollback', None) or getattr(t, 'RollBack', None)
    if rb:
        try:
            rb()
        except Exception:
            pass


def tx(name, doc=None, swallow_warnings=False):
    """Transaction context manager.

    Commits on normal exit, rolls back and re-raises on exception.

    Usage:
        with tx('My Tool', doc):
            ...
    """
    doc = doc or revit.doc
    t = DB.Transaction(doc, name)

    preproc = None
    if swallow_warnings:
        try:
            class _WarningsPreprocessor(DB.IFailuresPreprocessor):
                def PreprocessFailures(self, failuresAccessor):
                    for m in failuresAccessor.GetFailureMessages():
                        if m.GetSeverity() == DB.FailureSeverity.Warning:
                            failuresAccessor.DeleteWarning(m)
                    return DB.FailureProcessingResult.Continue

            preproc = _WarningsPreprocessor()
        except Exception:
            preproc = None

    class _Tx(object):
        def __enter__(self):
            t.Start()
            if preproc is not None:
                try:
                    opts = t.GetFailureHandlingOptions()
                    opts = opts.SetFailuresPreprocessor(preproc)
                    t.SetFailureHandlingOptions(opts)
                except Exception:
                    pass
            return t

        def __exit__(self, exc_type, exc, tb):
            if exc_type:
                _rollback(t)
                return False

            try:
                t.Commit()
            except Exception:
                # Last resort rollback
                _rollback(t)
                raise
            return False

    return _Tx()
