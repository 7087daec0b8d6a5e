"""Shared validators package for the signup form.

This package contains the field validators. Each one is a total, pure
function returning a ValidationResult; none of them raise on bad input.

Available validators:
- result.py: ValidationResult shared by every validator
- username.py: Username format validation
- password.py: Password strength validation
- confirmation.py: Password confirmation matching
- national_id.py: National ID (CPF) checksum validation
- phone.py: Phone number validation
- date_range.py: Start/end date range validation
"""
