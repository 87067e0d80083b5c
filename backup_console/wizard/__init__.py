"""
Interactive resolution of missing command parameters
"""

from backup_console.wizard.parameters import ParameterSet, ParameterSpec, missing_names, parameter_set
from backup_console.wizard.wizard import ArgumentWizard

__all__ = [
    'ArgumentWizard',
    'ParameterSet',
    'ParameterSpec',
    'missing_names',
    'parameter_set',
]
