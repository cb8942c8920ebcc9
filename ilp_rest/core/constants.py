"""System-wide constants shared by the service and the order generator."""

# Delivery charge added to every order on top of the pizzas
ORDER_CHARGE_IN_PENCE = 100

# Most pizzas a single order may contain
MAX_PIZZAS_PER_ORDER = 4

# Lengths of valid payment details
CARD_NUMBER_LENGTH = 16
CVV_LENGTH = 3

# Names used for pizzas that no restaurant sells
UNDEFINED_PIZZA_NAME = "Pizza-Surprise"
