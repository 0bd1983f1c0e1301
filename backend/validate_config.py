#!/usr/bin/env python3
"""
Configuration Validation Script
Validates that the sales bot secrets are set and usable
"""
import os
import sys
from dotenv import load_dotenv

from sales_bot.core.errors import CredentialError
from sales_bot.models.sales import ServiceCredential
from sales_bot.services.google_auth_service import build_signer

# Load environment variables
load_dotenv()

def validate_config():
    """Validate configuration"""
    print("Validating configuration...\n")
    
    errors = []
    warnings = []
    
    # Check service account
    service_account_json = os.getenv('GOOGLE_SERVICE_ACCOUNT')
    if not service_account_json:
        errors.append("GOOGLE_SERVICE_ACCOUNT is not set")
    else:
        try:
            credential = ServiceCredential.from_json(service_account_json)
            print(f"Service account: {credential.client_email}")
            build_signer(credential)
            print("Private key loads")
        except CredentialError as e:
            errors.append(str(e))
    
    # Check AI gateway key
    api_key = os.getenv('LOVABLE_API_KEY')
    if not api_key:
        errors.append("LOVABLE_API_KEY is not set")
    else:
        print("LOVABLE_API_KEY is set")
    
    print("AI_MODEL:", os.getenv('AI_MODEL', 'google/gemini-2.5-flash'))
    
    if not os.getenv('DEFAULT_FOLDER_ID'):
        warnings.append("DEFAULT_FOLDER_ID not set (requests must send folderId)")
    else:
        print("DEFAULT_FOLDER_ID is set")
    print("\n" + "="*60)
    if warnings:
        print("\nWARNINGS:")
        for w in warnings:
            print(" ", w)
    if errors:
        print("\nERRORS:")
        for e in errors:
            print(" ", e)
        print("\nValidation failed. Fix errors above.\n")
        return False
    print("\nValidation passed.\n")
    return True

if __name__ == "__main__":
    success = validate_config()
    sys.exit(0 if success else 1)
