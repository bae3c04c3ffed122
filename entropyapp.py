# Password Entropy Tool
# Purpose: Estimate the entropy of passwords typed at the terminal and show their strength tier.


from cli import test_password_flow, live_evaluate_flow, show_tier_table
from entropy import ScoringEngine, config_from_environment, configure_logging


# main app menu and selection options
def main_menu(engine=None):
    engine = engine or ScoringEngine(config_from_environment())
    while True:
        print("\n=== Password Entropy Menu ===")
        print("1. Test a password")
        print("2. Live evaluation")
        print("3. Show strength tiers")
        print("4. Exit")

        try:
            choice = input("Choose an option (1-4): ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nExiting the program. Goodbye.")
            break

        if choice == '1':
            test_password_flow(engine)
        elif choice == '2':
            live_evaluate_flow(engine)
        elif choice == '3':
            show_tier_table(engine)
        elif choice == '4':
            print("Exiting the program. Goodbye.")
            break
        else:
            print("Invalid choice. Please enter a number from 1 to 4.")


if __name__ == "__main__":
    configure_logging()
    main_menu()
