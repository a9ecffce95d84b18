"""
Usage Examples for the Zuora API SDK
Demonstrates configuration, resource calls and error handling
"""

import logging

from zuora_api import (
    ClientError,
    ConfigLoader,
    ConfigValidator,
    ZuoraApi,
    ZuoraCallout,
    ZuoraConfig,
    ZuoraError,
)


# =============================================================================
# Example 1: Programmatic Configuration
# =============================================================================

def programmatic_config_example() -> ZuoraApi:
    """Configure the SDK with the same keys the Zuora console shows"""
    return ZuoraApi({
        "clientId": "xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx",
        "clientSecret": "XXXXX=XXXXXXXXXXXXXXXXXXXXXXXXXXXXXX=XXX",
        "baseUri": "https://rest.sandbox.eu.zuora.com",
        "apiVersion": "v1",
    })


# =============================================================================
# Example 2: File + Environment Configuration
# =============================================================================

def merged_config_example() -> ZuoraConfig:
    """
    Merge configuration from multiple sources
    Priority: programmatic > environment > file

    export ZUORA_CLIENT_ID="..."
    export ZUORA_CLIENT_SECRET="..."
    export ZUORA_BASE_URI="https://rest.zuora.com"
    export ZUORA_API_VERSION="v1"
    """
    loader = ConfigLoader()
    return loader.load(
        file="./config/zuora_config.json",
        env=True,
        config={"api_version": "v1"},
    )


# =============================================================================
# Example 3: Resource Calls
# =============================================================================

def account_example(zuora: ZuoraApi) -> None:
    """Create an account, set its default payment method and read it back"""
    created = zuora.account().create({
        "name": "John Doe",
        "currency": "EUR",
        "billCycleDay": 1,
        "autoPay": False,
        "billToContact": {"firstName": "John", "lastName": "Doe", "country": "Italy"},
    })

    payment_method = zuora.paymentMethod().create({
        "AccountId": created["accountId"],
        "Type": "CreditCardReferenceTransaction",
        "TokenId": "cus_gateway_customer",
        "SecondTokenId": "card_gateway_card",
    })
    zuora.paymentMethod().set_default_payment(created["accountId"], payment_method["Id"])

    account = zuora.account().get(created["accountNumber"], summary=True)
    print(f"Account {account['basicInfo']['accountNumber']} balance: {account['basicInfo']['balance']}")


# =============================================================================
# Example 4: Error Handling
# =============================================================================

def error_handling_example(zuora: ZuoraApi) -> None:
    """Zuora business failures come back as data, transport failures as exceptions"""
    result = zuora.account().get("NotExistingID")
    if not result.get("success", True):
        print(f"Lookup failed: {result['reasons'][0]['message']}")

    try:
        zuora.paymentMethod().set_default_payment("wrongAccountId", "wrongPaymentMethodId")
    except ClientError as e:
        print(e.format_error())
    except ZuoraError as e:
        print(e.get_description())


# =============================================================================
# Example 5: Callout Endpoint
# =============================================================================

def callout_example(headers: dict, query_params: dict, body: bytes) -> dict:
    """Hand a web framework request over to the callout receiver"""
    callout = ZuoraCallout({"username": "zuora", "password": "s3cret"})
    return callout.get_response(headers, query_params, body)


# =============================================================================
# Example 6: Configuration Validation
# =============================================================================

def validation_example() -> None:
    """Validate configuration before use"""
    validator = ConfigValidator()

    result = validator.validate({"client_id": "xxxxxxxx"})

    if not result.valid:
        print("Configuration validation failed:")
        for error in result.errors:
            print(f"  - {error.field}: {error.message}")


# =============================================================================
# Run Examples
# =============================================================================

if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    print("=== Zuora API Examples ===\n")

    print("Configuration Validation:")
    validation_example()
    print()

    print("Create Configuration Template:")
    ConfigLoader().create_template("./config/zuora_config.template.json")
    print("Configuration template created at ./config/zuora_config.template.json")
