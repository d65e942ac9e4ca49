from config.form import FormConfig
from signup.confirmation import render_confirmation
from signup.controller import SignupController
from signup.log import configure_logging
from signup.navigation import InMemoryNavigator


def main():
    patches = [
        {"firstName": "Khushi", "email": "khushi@gmail", "pan": "ABCDE1234"},
        {"lastName": "Kaushik", "username": "khushi13", "email": "khushi@gmail.com", "pan": "ABCDE1234F"},
        {"password": "s3cret!", "phoneCode": "+91", "phoneNumber": "9999999999"},
        {"country": "India", "city": "Pune", "aadhar": "123456789012"},
    ]

    # load config
    cfg = FormConfig.from_env()
    configure_logging(cfg.log_level)

    navigator = InMemoryNavigator()
    controller = SignupController(
        navigator,
        table=cfg.country_table(),
        success_route=cfg.success_route,
    )

    # run patches
    for i, patch in enumerate(patches, 1):
        for name, value in patch.items():
            controller.on_field_change(name, value)
        print(f"\nPATCH #{i}")
        print("errors:", {k: v for k, v in controller.errors.items() if v})
        print("submit enabled:", controller.is_submit_enabled)

    print("\ncity options:", ", ".join(controller.city_options()))

    if controller.on_submit():
        print(f"\nnavigated to {navigator.route}\n")
        print(render_confirmation(navigator.state))
    else:
        print("Form still has errors:", controller.errors)


if __name__ == "__main__":
    main()
