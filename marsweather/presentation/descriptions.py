"""Static per-detail text and icons shown on the weather details screen."""

from marsweather.models.common import WeatherDetail

ICONS: dict[WeatherDetail, str] = {
    WeatherDetail.TEMPERATURE: "thermometer.medium",
    WeatherDetail.DAYLIGHT: "sun.and.horizon.fill",
    WeatherDetail.CONDITIONS: "cloud.sun.fill",
    WeatherDetail.PRESSURE: "gauge.medium",
    WeatherDetail.IRRADIANCE: "sun.max.fill",
}

SUMMARY_TITLES: dict[WeatherDetail, str] = {
    WeatherDetail.TEMPERATURE: "Average Temperature",
    WeatherDetail.DAYLIGHT: "Average Daylight Duration",
    WeatherDetail.CONDITIONS: "Percentage of Sunny Days",
    WeatherDetail.PRESSURE: "Average Pressure",
    WeatherDetail.IRRADIANCE: "Most Frequent UV Index",
}

DESCRIPTIONS: dict[WeatherDetail, str] = {
    WeatherDetail.TEMPERATURE: (
        "Mars is farther from the Sun than Earth, it makes that Mars is colder "
        "than our planet. Moreover, Martian's atmosphere, which is extremely "
        "tenuous, does not retain the heat; hence the difference between day "
        "and night's temperatures is more pronounced than in our planet."
    ),
    WeatherDetail.DAYLIGHT: (
        "The duration of a Martian day (sol) is about 24 hours and 40 minutes. "
        "The duration of daylight varies along the Martian year, as on Earth."
    ),
    WeatherDetail.CONDITIONS: (
        "Weather on Mars is more extreme than Earth's. Mars is cooler and with "
        "bigger differences between day and night temperatures. Moreover, dust "
        "storms lash its surface. However, Mars' and Earth's climates have "
        "important similarities, such as the polar ice caps or seasonal "
        "changes. As on Earth, on Mars we can have sunny, cloudy or windy "
        "days, for example."
    ),
    WeatherDetail.PRESSURE: (
        "Pressure is a measure of the total mass in a column of air above us. "
        "Because Martian's atmosphere is extremely tenuous, pressure on Mars' "
        "surface is about 160 times smaller than pressure on Earth. Average "
        "pressure on Martian surface is about 700 Pascals (100000 Pascals on "
        "Earth) Curiosity is into Gale crater, which is about 5 kilometers "
        "(3 miles) depth. For this reason, pressure measured by REMS is "
        "usually higher than average pressure on the entire planet."
    ),
    WeatherDetail.IRRADIANCE: (
        "Local ultraviolet (UV) irradiance index is an indicator of the "
        "intensity of the ultraviolet radiation from the Sun at Curiosity's "
        "location. UV radiation is a damaging agent for life. On Earth, the "
        "ozone layer prevents damaging ultraviolet light from reaching the "
        "surface, to the benefit of both plants and animals. However, on Mars, "
        "due to the absence of ozone in the atmosphere, ultraviolet radiation "
        "reaches the Martian surface."
    ),
}
