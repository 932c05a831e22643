"""
Input validation utilities for domain names
"""

import re


class ValidationError(Exception):
    """Custom exception for validation errors"""
    pass


class DomainValidator:
    """Validator for fully qualified domain names"""

    # RFC-compliant domain regex; the TLD may be an IDN in punycode (xn--)
    DOMAIN_REGEX = re.compile(
        r'^(?:[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?\.)+'
        r'(?:[a-zA-Z]{2,63}|xn--[a-zA-Z0-9-]{1,59})$'
    )

    @classmethod
    def validate(cls, domain: str) -> str:
        """
        Validate a domain name.

        Args:
            domain: Domain name to validate

        Returns:
            Cleaned domain name (lowercase, stripped)

        Raises:
            ValidationError: If domain is invalid
        """
        if not domain or not isinstance(domain, str):
            raise ValidationError("Domain name cannot be empty")

        domain = domain.strip().lower()

        # Remove http(s):// and a trailing slash if present
        domain = re.sub(r'^https?://', '', domain)
        domain = domain.rstrip('/')

        if len(domain) > 253:  # RFC 1035
            raise ValidationError("Domain name too long (max 253 characters)")

        if not cls.DOMAIN_REGEX.match(domain):
            raise ValidationError(
                f"Invalid domain format: {domain}. "
                "Domain must be a fully qualified name containing only letters, numbers, and hyphens."
            )

        return domain

    @classmethod
    def extract_sld(cls, domain: str) -> str:
        """
        Extract Second-Level Domain (SLD) from domain name.

        Args:
            domain: Domain name (e.g., 'example.co.uk')

        Returns:
            SLD (e.g., 'example')
        """
        return domain.split('.', 1)[0]

    @classmethod
    def extract_tld(cls, domain: str) -> str:
        """
        Extract everything after the SLD, which eNom treats as the TLD.

        Args:
            domain: Domain name

        Returns:
            TLD (e.g., 'com', 'co.uk')
        """
        parts = domain.split('.', 1)
        if len(parts) < 2:
            return ""
        return parts[1]


def validate_domain(domain: str) -> str:
    """Convenience function for domain validation"""
    return DomainValidator.validate(domain)
